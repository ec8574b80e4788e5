#!/usr/bin/env python3
"""
Style Animation Engine - Demo Entry Point

Loads configuration, registers two subjects and drives a queued
multi-stage animation plus a mid-flight interrupt with the asyncio ticker,
printing the rendered style of every subject as it changes.
"""

import asyncio

from animations.properties import (
    add, background_color, left, opacity, rgba, rotate, to, to_rgba, translate_x,
)
from engine.ticker import Ticker
from managers.config_manager import ConfigManager
from models.enums import LogCategory, SpringPreset
from services.animation_service import AnimationService
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def print_frame(frames):
    for subject_id, pairs in frames.items():
        css = "; ".join(f"{name}: {value}" for name, value in pairs)
        print(f"  {subject_id:<6} {css}")


async def main():
    print("=" * 60)
    print("Style Animation Engine")
    print("=" * 60)
    print()

    config = ConfigManager().load()
    service = AnimationService(config)

    service.add("card", [left(0), opacity(1), background_color(*rgba(255, 255, 255))])
    service.add_serialized("badge", [
        {"kind": "TRANSLATE_X", "values": [0], "unit": "PX"},
        {"kind": "ROTATE", "values": [0]},
    ])

    ticker = Ticker(service, on_frame=print_frame)
    await ticker.start()

    try:
        service.dispatch(
            "card",
            service.builder()
            .duration(400)
            .props(left(to(120)), opacity(to(0.6)))
            .then()
            .delay(100)
            .easing("quad_in_out")
            .props(background_color(*to_rgba(30, 144, 255)))
            .queue(),
        )
        service.dispatch(
            "badge",
            service.builder()
            .spring(SpringPreset.WOBBLY)
            .props(translate_x(to(40)), rotate(add(180)))
            .interrupt(),
        )

        await asyncio.sleep(0.2)

        # Retarget the badge while it is still moving
        service.dispatch(
            "badge",
            service.builder()
            .spring(SpringPreset.GENTLE)
            .props(translate_x(to(-20)))
            .interrupt(),
        )

        await ticker.run_until_idle(timeout=10)
    finally:
        await ticker.stop()

    log.info("Final styles", **{str(k): v for k, v in service.render_all().items()})


if __name__ == "__main__":
    asyncio.run(main())
