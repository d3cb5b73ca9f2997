"""vecproj: interactive vector projection and rejection demo."""

__version__ = "0.1.0"

from .math2d import angle_between, dot, projection, rejection, scale
from .scene import Scene, build_scene, draw_scene, on_pointer_move
