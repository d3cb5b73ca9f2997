from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

Color = tuple[int, int, int]


@dataclass
class PaletteConfig:
    background: Color = (255, 255, 255)
    pointer: Color = (255, 0, 0)
    reference: Color = (0, 255, 0)
    projection: Color = (0, 0, 255)
    rejection: Color = (120, 120, 120)
    label: Color = (255, 0, 0)


@dataclass
class ReferenceConfig:
    # reference direction is (width / width_divisor, height / height_divisor)
    width_divisor: float = 1.1
    height_divisor: float = 3.1
    length: float = 50.0


@dataclass
class SceneConfig:
    stroke_width: float = 3.0
    font_size: int = 16
    angle_precision: int = 4
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    reference: ReferenceConfig = field(default_factory=ReferenceConfig)


@dataclass
class AppConfig:
    width: int = 400
    height: int = 400
    title: str = "Vector projection and rejection"
    scene: SceneConfig = field(default_factory=SceneConfig)

    @staticmethod
    def from_yaml(path: Path) -> "AppConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> AppConfig:
    default_palette = PaletteConfig()
    # an empty YAML section loads as None
    scene_raw = raw.get("scene") or {}
    palette_raw = scene_raw.get("palette") or {}

    def _color(value: tuple[int, int, int] | list[int] | None, default: Color) -> Color:
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]))
        return default

    palette = PaletteConfig(
        background=_color(palette_raw.get("background"), default_palette.background),
        pointer=_color(palette_raw.get("pointer"), default_palette.pointer),
        reference=_color(palette_raw.get("reference"), default_palette.reference),
        projection=_color(palette_raw.get("projection"), default_palette.projection),
        rejection=_color(palette_raw.get("rejection"), default_palette.rejection),
        label=_color(palette_raw.get("label"), default_palette.label),
    )
    reference = ReferenceConfig(**(scene_raw.get("reference") or {}))
    scene_values = {k: v for k, v in scene_raw.items() if k not in {"palette", "reference"}}
    scene = SceneConfig(palette=palette, reference=reference, **scene_values)
    app_values = {k: v for k, v in raw.items() if k != "scene"}
    config = AppConfig(scene=scene, **app_values)
    validate_config(config)
    return config


def validate_config(config: AppConfig) -> None:
    if config.width <= 0 or config.height <= 0:
        raise ValueError(f"Window size must be positive, got {config.width}x{config.height}")
    reference = config.scene.reference
    if reference.width_divisor == 0 or reference.height_divisor == 0:
        raise ValueError("Reference divisors must be non-zero")
    if reference.length <= 0:
        raise ValueError(f"Reference length must be positive, got {reference.length}")
    if config.scene.stroke_width <= 0:
        raise ValueError(f"Stroke width must be positive, got {config.scene.stroke_width}")
    if config.scene.angle_precision < 0:
        raise ValueError(f"Angle precision must be non-negative, got {config.scene.angle_precision}")
