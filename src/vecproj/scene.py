from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector2

from .canvas import Canvas
from .config import Color, SceneConfig
from .math2d import angle_between, normalized_to, projection, rejection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    name: str
    origin: Vector2
    offset: Vector2
    color: Color


@dataclass(frozen=True)
class Label:
    text: str
    position: Vector2
    color: Color


@dataclass(frozen=True)
class Scene:
    background: Color
    stroke_width: float
    segments: Tuple[Segment, ...]
    label: Label
    angle: float

    def segment(self, name: str) -> Segment:
        for segment in self.segments:
            if segment.name == name:
                return segment
        raise KeyError(name)


def reference_vector(width: float, height: float, config: SceneConfig) -> Vector2:
    ref = config.reference
    return normalized_to(Vector2(width / ref.width_divisor, height / ref.height_divisor), ref.length)


def format_angle(angle: float, precision: int) -> str:
    return f"{angle:.{precision}f}"


def build_scene(pointer: Tuple[float, float], size: Tuple[float, float], config: SceneConfig) -> Scene:
    """Compute everything one redraw needs from explicit pointer and surface size."""
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface size must be positive, got {width}x{height}")

    palette = config.palette
    center = Vector2(width / 2, height / 2)
    mouse = Vector2(pointer) - center
    ref = reference_vector(width, height, config)
    angle = angle_between(mouse, ref)

    # draw order: pointer, reference, projection, rejection
    segments = (
        Segment("pointer", center, mouse, palette.pointer),
        Segment("reference", center, ref, palette.reference),
        Segment("projection", center, projection(mouse, ref), palette.projection),
        Segment("rejection", center, rejection(mouse, ref), palette.rejection),
    )
    label = Label(format_angle(angle, config.angle_precision), mouse + center, palette.label)
    return Scene(
        background=palette.background,
        stroke_width=config.stroke_width,
        segments=segments,
        label=label,
        angle=angle,
    )


def _line_to(canvas: Canvas, segment: Segment, stroke_width: float) -> None:
    canvas.push()
    canvas.translate(segment.origin.x, segment.origin.y)
    canvas.stroke(segment.color)
    canvas.stroke_weight(stroke_width)
    canvas.line(0.0, 0.0, segment.offset.x, segment.offset.y)
    canvas.pop()


def draw_scene(canvas: Canvas, scene: Scene) -> None:
    canvas.clear(scene.background)
    pointer, reference, *components = scene.segments
    _line_to(canvas, pointer, scene.stroke_width)
    _line_to(canvas, reference, scene.stroke_width)
    canvas.fill(scene.label.color)
    canvas.text(scene.label.text, scene.label.position.x, scene.label.position.y)
    for segment in components:
        _line_to(canvas, segment, scene.stroke_width)


def on_pointer_move(
    position: Tuple[float, float],
    size: Tuple[float, float],
    canvas: Canvas,
    config: SceneConfig,
) -> Scene:
    scene = build_scene(position, size, config)
    logger.debug("redraw pointer=%s size=%s angle=%s", tuple(position), tuple(size), scene.label.text)
    draw_scene(canvas, scene)
    return scene
