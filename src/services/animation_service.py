"""Animation service - Owns one AnimationModel per subject and routes actions to them"""

from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set

from animations.builder import AnimationBuilder, animate
from engine.animation_model import AnimationModel, UpdateResult, snapshot, update
from engine.render import RenderedPair, render
from models.action import Action, Tick
from models.config import EngineConfig
from models.enums import LogCategory
from models.style import StyleProperty
from utils.logger import get_category_logger
from utils.serialization import Serializer

log = get_category_logger(LogCategory.SERVICE)

SubjectID = Hashable


class AnimationService:
    """
    Registry of animated subjects (widgets, cards, list items...)

    Each subject owns an independent AnimationModel; the service applies
    actions to one or all of them and remembers which subjects asked for
    another tick.

    Example:
        service = AnimationService(config)
        service.add("card", [opacity(0)])
        service.dispatch("card", service.builder().props(opacity(to(1))).interrupt())

        while service.needs_tick:
            service.tick(16)
        service.render("card")   # [("opacity", "1")]
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.models: Dict[SubjectID, AnimationModel] = {}
        self._pending: Set[SubjectID] = set()

        # Called whenever a subject starts requesting ticks (see engine.ticker)
        self.on_tick_requested: Optional[Callable[[], None]] = None

        log.info("AnimationService initialized", fps=self.config.fps)

    # ------------------------------------------------------------
    # Subjects
    # ------------------------------------------------------------

    def add(self, subject_id: SubjectID, style: Iterable[StyleProperty] = ()) -> AnimationModel:
        """Register a subject with its starting style (replaces an existing one)."""
        if subject_id in self.models:
            log.warn(f"Subject {subject_id!r} already registered, replacing its model")
        model = AnimationModel.init(style)
        self.models[subject_id] = model
        self._pending.discard(subject_id)
        log.debug(f"Added subject {subject_id!r}", properties=len(model.previous))
        return model

    def add_serialized(self, subject_id: SubjectID, items: Iterable[dict]) -> AnimationModel:
        """
        Register a subject from a JSON-style seed, e.g. loaded from a file:
        [{"kind": "LEFT", "values": [0], "unit": "PX"}, ...]

        Invalid entries are logged and skipped (see Serializer.style_from_list).
        """
        return self.add(subject_id, Serializer.style_from_list(items))

    def remove(self, subject_id: SubjectID) -> None:
        self.models.pop(subject_id, None)
        self._pending.discard(subject_id)
        log.debug(f"Removed subject {subject_id!r}")

    def get_model(self, subject_id: SubjectID) -> AnimationModel:
        return self.models[subject_id]

    def subject_ids(self) -> List[SubjectID]:
        return list(self.models.keys())

    @property
    def needs_tick(self) -> bool:
        return bool(self._pending)

    def builder(self) -> AnimationBuilder:
        """Builder preloaded with the configured default easing, spring and preset table."""
        return animate(self.config.default_easing, self.config.default_spring, self.config.springs)

    # ------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------

    def _apply(self, subject_id: SubjectID, action: Action) -> UpdateResult:
        result = update(action, self.models[subject_id], self.config.integrator)
        self.models[subject_id] = result.model
        if result.request_tick:
            self._pending.add(subject_id)
        else:
            self._pending.discard(subject_id)
        return result

    def _notify(self, requested: bool) -> None:
        if requested and self.on_tick_requested is not None:
            self.on_tick_requested()

    def dispatch(self, subject_id: SubjectID, action: Action) -> bool:
        """
        Apply an action to one subject.

        Returns:
            True if the subject wants another tick

        Raises:
            KeyError: unknown subject
        """
        if subject_id not in self.models:
            raise KeyError(f"Unknown subject: {subject_id!r}")
        requested = self._apply(subject_id, action).request_tick
        self._notify(requested)
        return requested

    def dispatch_all(self, action: Action) -> bool:
        """Apply the same action to every subject; True if any wants a tick."""
        requested = False
        for subject_id in list(self.models):
            requested = self._apply(subject_id, action).request_tick or requested
        self._notify(requested)
        return requested

    def dispatch_many(self, subject_ids: Iterable[SubjectID], action: Action) -> bool:
        """Apply the same action to the given subjects; True if any wants a tick."""
        requested = False
        for subject_id in subject_ids:
            requested = self.dispatch(subject_id, action) or requested
        return requested

    def tick(self, delta_ms: float) -> bool:
        """
        Deliver one tick to every subject that asked for it.

        Returns:
            True while any subject still wants ticks
        """
        action = Tick(delta_ms)
        for subject_id in list(self._pending):
            if subject_id in self.models:
                self._apply(subject_id, action)
            else:
                self._pending.discard(subject_id)
        return self.needs_tick

    # ------------------------------------------------------------
    # Output
    # ------------------------------------------------------------

    def render(self, subject_id: SubjectID) -> List[RenderedPair]:
        return render(self.models[subject_id])

    def render_all(self) -> Dict[SubjectID, List[RenderedPair]]:
        return {subject_id: render(model) for subject_id, model in self.models.items()}

    def snapshot_dict(self, subject_id: SubjectID) -> List[dict]:
        """Current style as JSON-compatible dicts."""
        return Serializer.style_to_list(snapshot(self.models[subject_id]))
