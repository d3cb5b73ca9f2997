"""Drawing surfaces the redraw handler can target.

``Canvas`` is the small immediate-mode API the handler speaks: clear, a
save/restore pair around a translation, stroke and fill state, lines and text.
``RecordingCanvas`` turns the calls into a JSON-friendly command list that the
browser page replays; ``PygameCanvas`` renders onto a ``pygame.Surface``.
"""
from __future__ import annotations

from typing import Any, List, Protocol

import pygame

from .config import Color


class Canvas(Protocol):
    def clear(self, color: Color) -> None: ...

    def push(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def pop(self) -> None: ...

    def stroke(self, color: Color) -> None: ...

    def stroke_weight(self, width: float) -> None: ...

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None: ...

    def fill(self, color: Color) -> None: ...

    def text(self, value: str, x: float, y: float) -> None: ...


class RecordingCanvas:
    def __init__(self) -> None:
        self.commands: List[List[Any]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.commands.append([name, *args])

    def clear(self, color: Color) -> None:
        self._record("clear", list(color))

    def push(self) -> None:
        self._record("push")

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def pop(self) -> None:
        self._record("pop")

    def stroke(self, color: Color) -> None:
        self._record("stroke", list(color))

    def stroke_weight(self, width: float) -> None:
        self._record("stroke_weight", width)

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self._record("line", x0, y0, x1, y1)

    def fill(self, color: Color) -> None:
        self._record("fill", list(color))

    def text(self, value: str, x: float, y: float) -> None:
        self._record("text", value, x, y)


class PygameCanvas:
    """Canvas over a pygame surface; translations accumulate until ``pop``."""

    def __init__(self, surface: pygame.Surface, font_size: int = 16):
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, font_size)
        self._offset = (0.0, 0.0)
        self._stack: List[tuple[float, float]] = []
        self._stroke: Color = (0, 0, 0)
        self._stroke_width = 1
        self._fill: Color = (0, 0, 0)

    @property
    def offset(self) -> tuple[float, float]:
        return self._offset

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def push(self) -> None:
        self._stack.append(self._offset)

    def translate(self, x: float, y: float) -> None:
        self._offset = (self._offset[0] + x, self._offset[1] + y)

    def pop(self) -> None:
        if not self._stack:
            raise IndexError("pop() called without a matching push()")
        self._offset = self._stack.pop()

    def stroke(self, color: Color) -> None:
        self._stroke = color

    def stroke_weight(self, width: float) -> None:
        self._stroke_width = max(1, int(round(width)))

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        ox, oy = self._offset
        pygame.draw.line(
            self.surface,
            self._stroke,
            (ox + x0, oy + y0),
            (ox + x1, oy + y1),
            self._stroke_width,
        )

    def fill(self, color: Color) -> None:
        self._fill = color

    def text(self, value: str, x: float, y: float) -> None:
        ox, oy = self._offset
        rendered = self.font.render(value, True, self._fill)
        # anchor at the baseline-left corner like an HTML canvas
        self.surface.blit(rendered, (ox + x, oy + y - self.font.get_ascent()))
