import pytest

from animations.builder import animate
from animations.properties import left, opacity, rotate, translate_x
from engine.animation_model import AnimationModel, update
from models.action import Tick
from models.config import EngineConfig
from models.enums import LogLevel
from models.transition import EasingConfig, ease_linear
from services.animation_service import AnimationService
from utils.logger import get_logger


@pytest.fixture(autouse=True)
def restore_logger():
    """Tests may reconfigure the logger singleton; put it back afterwards."""
    logger = get_logger()
    level, colors = logger.min_level, logger.use_colors
    yield
    logger.min_level, logger.use_colors = level, colors


@pytest.fixture
def linear():
    """Builder whose stages default to linear easing (easy numbers to assert on)."""
    return animate(default_easing=EasingConfig(duration_ms=1000, ease=ease_linear))


@pytest.fixture
def seeded_model():
    """Idle model with one plain and two transform properties."""
    return AnimationModel.init([left(0), opacity(1), translate_x(0), rotate(0)])


@pytest.fixture
def config():
    return EngineConfig(log_level=LogLevel.WARN)


@pytest.fixture
def service(config):
    return AnimationService(config)


@pytest.fixture
def tick_until_idle():
    """Tick a model until it stops requesting ticks; returns (model, ticks)."""
    return _tick_until_idle


def _tick_until_idle(model, delta_ms=16, max_ticks=1000):
    ticks = 0
    while model.is_running:
        result = update(Tick(delta_ms), model)
        model = result.model
        ticks += 1
        if ticks >= max_ticks:
            break
    return model, ticks
