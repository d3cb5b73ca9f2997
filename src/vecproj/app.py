from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame

from .canvas import PygameCanvas
from .config import AppConfig, validate_config
from .logging_config import setup_logging
from .scene import on_pointer_move

logger = logging.getLogger(__name__)


class ProjectionApp:
    """Owns the pygame window and forwards pointer motion to the redraw handler."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.screen: Optional[pygame.Surface] = None
        self.canvas: Optional[PygameCanvas] = None
        self.pointer: Optional[tuple[int, int]] = None
        self.running = False

    def open(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._set_surface(pygame.display.set_mode((self.config.width, self.config.height), pygame.RESIZABLE))
        logger.info("Window opened at %dx%d", self.config.width, self.config.height)

    def close(self) -> None:
        pygame.quit()
        logger.info("Window closed")

    def _set_surface(self, surface: pygame.Surface) -> None:
        self.screen = surface
        self.canvas = PygameCanvas(surface, font_size=self.config.scene.font_size)
        self.canvas.clear(self.config.scene.palette.background)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True when the surface was redrawn."""
        if event.type == pygame.QUIT:
            self.running = False
            return False
        if event.type == pygame.VIDEORESIZE:
            self._set_surface(pygame.display.get_surface())
            logger.debug("Surface resized to %s", self.screen.get_size())
            if self.pointer is None:
                return True
            return self.redraw(self.pointer)
        if event.type == pygame.MOUSEMOTION:
            self.pointer = tuple(event.pos)
            return self.redraw(self.pointer)
        return False

    def redraw(self, pointer: tuple[int, int]) -> bool:
        on_pointer_move(pointer, self.screen.get_size(), self.canvas, self.config.scene)
        return True

    def run(self) -> None:
        self.open()
        self.running = True
        clock = pygame.time.Clock()
        try:
            while self.running:
                dirty = False
                for event in pygame.event.get():
                    dirty = self.handle_event(event) or dirty
                if dirty:
                    pygame.display.flip()
                clock.tick(60)
        finally:
            self.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive vector projection and rejection demo")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with window and scene settings")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    args = parser.parse_args()

    setup_logging(level=args.log_level, log_file=args.log_file)
    config = AppConfig.from_yaml(args.config) if args.config else AppConfig()
    if args.width is not None:
        config.width = args.width
    if args.height is not None:
        config.height = args.height
    validate_config(config)
    ProjectionApp(config).run()


if __name__ == "__main__":
    main()
