from __future__ import annotations

import math

import pytest
from pygame.math import Vector2
from pytest import approx

from vecproj.canvas import RecordingCanvas
from vecproj.config import PaletteConfig, SceneConfig
from vecproj.math2d import dot, magnitude
from vecproj.scene import build_scene, draw_scene, format_angle, on_pointer_move, reference_vector


def test_reference_vector_has_fixed_length_and_direction():
    config = SceneConfig()
    ref = reference_vector(400, 400, config)

    assert magnitude(ref) == approx(50.0)
    assert ref.x > 0 and ref.y > 0
    assert math.atan2(ref.y, ref.x) == approx(math.atan2(400 / 3.1, 400 / 1.1))


def test_build_scene_pointer_is_relative_to_center():
    scene = build_scene((300, 100), (400, 400), SceneConfig())

    pointer = scene.segment("pointer")
    assert pointer.origin == Vector2(200, 200)
    assert pointer.offset == Vector2(100, -100)
    assert scene.label.position == Vector2(300, 100)


def test_build_scene_components_decompose_pointer():
    scene = build_scene((350, 50), (400, 300), SceneConfig())
    pointer = scene.segment("pointer").offset
    ref = scene.segment("reference").offset
    proj = scene.segment("projection").offset
    rej = scene.segment("rejection").offset

    assert (proj + rej).x == approx(pointer.x)
    assert (proj + rej).y == approx(pointer.y)
    assert dot(rej, ref) == approx(0.0, abs=1e-9)
    assert proj.x * ref.y - proj.y * ref.x == approx(0.0, abs=1e-9)


def test_build_scene_uses_palette_and_label_precision():
    palette = PaletteConfig()
    scene = build_scene((250, 260), (400, 400), SceneConfig(angle_precision=2))

    assert [s.name for s in scene.segments] == ["pointer", "reference", "projection", "rejection"]
    assert [s.color for s in scene.segments] == [
        palette.pointer,
        palette.reference,
        palette.projection,
        palette.rejection,
    ]
    assert scene.background == (255, 255, 255)
    assert scene.label.color == (255, 0, 0)
    assert scene.label.text == format_angle(scene.angle, 2)
    assert len(scene.label.text.split(".")[1]) == 2


def test_pointer_at_center_gives_nan_label_without_raising():
    scene = build_scene((200, 200), (400, 400), SceneConfig())

    assert math.isnan(scene.angle)
    assert scene.label.text == "nan"
    assert scene.segment("projection").offset == Vector2()
    assert scene.segment("rejection").offset == Vector2()


@pytest.mark.parametrize("size", [(0, 400), (400, -1)])
def test_build_scene_rejects_empty_surface(size):
    with pytest.raises(ValueError):
        build_scene((10, 10), size, SceneConfig())


def test_draw_scene_emits_commands_in_order():
    canvas = RecordingCanvas()
    scene = build_scene((300, 100), (400, 400), SceneConfig())
    draw_scene(canvas, scene)

    names = [command[0] for command in canvas.commands]
    segment_block = ["push", "translate", "stroke", "stroke_weight", "line", "pop"]
    assert names == ["clear"] + segment_block * 2 + ["fill", "text"] + segment_block * 2

    assert canvas.commands[0] == ["clear", [255, 255, 255]]
    strokes = [command[1] for command in canvas.commands if command[0] == "stroke"]
    assert strokes == [[255, 0, 0], [0, 255, 0], [0, 0, 255], [120, 120, 120]]
    assert all(command[1:] == [200.0, 200.0] for command in canvas.commands if command[0] == "translate")
    assert all(command[1] == 3.0 for command in canvas.commands if command[0] == "stroke_weight")

    first_line = next(command for command in canvas.commands if command[0] == "line")
    assert first_line == ["line", 0.0, 0.0, 100.0, -100.0]
    text = next(command for command in canvas.commands if command[0] == "text")
    assert text == ["text", scene.label.text, 300.0, 100.0]


def test_on_pointer_move_draws_and_returns_scene():
    canvas = RecordingCanvas()
    scene = on_pointer_move((120, 340), (400, 400), canvas, SceneConfig())

    assert canvas.commands
    assert canvas.commands[-1] == ["pop"]
    assert scene.angle == approx(float(scene.label.text), abs=1e-4)


def test_each_redraw_starts_from_a_cleared_surface():
    canvas = RecordingCanvas()
    on_pointer_move((10, 10), (400, 400), canvas, SceneConfig())
    first = len(canvas.commands)
    on_pointer_move((390, 390), (400, 400), canvas, SceneConfig())

    assert canvas.commands[first][0] == "clear"
    assert len(canvas.commands) == 2 * first
