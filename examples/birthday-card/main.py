"""Birthday Card: plays the scripted cue presentation in a pygame window.

Exercises cue, cue-tween and cue-typewriter. Assets are looked up under
--assets; anything missing falls back (the cake) or is skipped (background,
photos), so the demo runs with no asset files at all.

Controls:
  Esc     Quit
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import pygame

from cue import (
    DirectoryLoader,
    PerspectiveCamera,
    Presentation,
    PresentationConfig,
    Presenter,
    Scene,
    load_config,
    setup_logging,
)

from ui.constants import SCREEN_H, SCREEN_W
from ui.overlays import Panel, TextLine
from ui.renderer import PygameRenderer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config", type=Path, help="JSON file overriding presentation defaults")
    parser.add_argument(
        "--assets", type=Path, default=Path(__file__).parent, help="directory asset URLs resolve against"
    )
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--core-log-level", help="level for the cue packages (default: --log-level)")
    return parser.parse_args(argv)


async def play(args: argparse.Namespace) -> None:
    config = load_config(args.config) if args.config else PresentationConfig()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Birthday Card - cue demo")
    font = pygame.font.SysFont("monospace", 28)

    lines = [TextLine() for _ in range(4)]
    text_area = Panel()
    caption = Panel(visible=False, opacity=0.0)
    card = Panel(visible=False, opacity=0.0)
    renderer = PygameRenderer(screen, font, lines, text_area, caption, card)

    ctx = Presentation(
        scene=Scene(),
        camera=PerspectiveCamera(),
        renderer=renderer,
        loader=DirectoryLoader(args.assets),
        sinks=lines,
        text_area=text_area,
        caption=caption,
        card=card,
        config=config,
    )
    presenter = Presenter(ctx)
    closed = asyncio.Event()
    renderer.on_quit = closed.set

    # Closing the window ends the process; playback itself has no abort path.
    show = asyncio.create_task(presenter.run_forever())
    closing = asyncio.create_task(closed.wait())
    try:
        await asyncio.wait({show, closing}, return_when=asyncio.FIRST_COMPLETED)
        presenter.stop()
    finally:
        pygame.quit()


def main() -> None:
    args = parse_args()
    setup_logging(args.log_level, core_level=args.core_log_level)
    asyncio.run(play(args))
    sys.exit()


if __name__ == "__main__":
    main()
