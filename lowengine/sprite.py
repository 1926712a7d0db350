"""Drawable sprite with a draw layer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

Rect = Tuple[int, int, int, int]
Vector = Tuple[float, float]


@dataclass
class Sprite:
    """A textured quad with a transform and a layer number.

    When no texture rectangle is given, the sprite covers the whole texture,
    taken from the texture's ``size`` attribute if it has one.
    """

    texture: Any = None
    texture_rect: Optional[Rect] = None
    position: Vector = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vector = (1.0, 1.0)
    origin: Vector = (0.0, 0.0)
    layer: int = 0

    def __post_init__(self) -> None:
        if self.texture_rect is None:
            width, height = getattr(self.texture, "size", (0, 0))
            self.texture_rect = (0, 0, int(width), int(height))

    def copy(self) -> "Sprite":
        """Return an independent copy sharing the same texture."""
        return replace(self)