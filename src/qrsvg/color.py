"""Color values understood by the image backends.

Backends only need two answers from a color: its sRGB triplet and, when the
color carries one, its alpha percentage. Anything with a ``to_rgb()`` method
qualifies; ``Rgb`` and ``Alpha`` are the concrete values shipped here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from PIL import ImageColor

logger = logging.getLogger(__name__)

OPAQUE = 100


class Color(Protocol):
    def to_rgb(self) -> "Rgb":
        ...


@dataclass(frozen=True)
class Rgb:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                logger.error("%s channel out of range: %r", name, value)
                raise ValueError(f"{name} must be between 0 and 255, got {value}")

    def to_rgb(self) -> "Rgb":
        return self


@dataclass(frozen=True)
class Alpha:
    """Wraps a base color with an opacity percentage (0 = transparent)."""

    alpha: int
    base: Color

    def __post_init__(self) -> None:
        if not 0 <= self.alpha <= 100:
            logger.error("alpha out of range: %r", self.alpha)
            raise ValueError(f"alpha must be between 0 and 100, got {self.alpha}")

    def to_rgb(self) -> Rgb:
        return self.base.to_rgb()


def alpha_of(color: Color) -> Optional[int]:
    """Alpha percentage if the color carries one, else None."""
    return getattr(color, "alpha", None)


def resolve_alpha(color: Color) -> int:
    alpha = alpha_of(color)
    return OPAQUE if alpha is None else alpha


def format_color(color: Color) -> str:
    rgb = color.to_rgb()
    return "#{:02x}{:02x}{:02x}".format(rgb.red, rgb.green, rgb.blue)


def parse_color(value: str) -> Color:
    """Resolve a CSS color string (name, hex, rgb()/hsl()) into a color.

    Strings carrying an alpha channel, such as ``#ff000080``, come back as an
    ``Alpha`` whose percentage is the alpha byte scaled to 0-100.
    """
    channels = ImageColor.getrgb(value)
    rgb = Rgb(*channels[:3])
    if len(channels) == 4:
        return Alpha(int(round(channels[3] * 100 / 255)), rgb)
    return rgb
