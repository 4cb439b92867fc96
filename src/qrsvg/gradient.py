"""Two-stop gradient fills and their user-space geometry."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from .color import Color


class GradientType(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    INVERSE_DIAGONAL = "inverse_diagonal"
    RADIAL = "radial"


@dataclass(frozen=True)
class Gradient:
    start_color: Color
    end_color: Color
    type: GradientType

    @property
    def is_radial(self) -> bool:
        return self.type is GradientType.RADIAL


_Geometry = Callable[[float, float, float, float], Dict[str, float]]

_GEOMETRY: Dict[GradientType, _Geometry] = {
    GradientType.HORIZONTAL: lambda x, y, w, h: {"x1": x, "y1": y, "x2": x + w, "y2": y},
    GradientType.VERTICAL: lambda x, y, w, h: {"x1": x, "y1": y, "x2": x, "y2": y + h},
    GradientType.DIAGONAL: lambda x, y, w, h: {"x1": x, "y1": y, "x2": x + w, "y2": y + h},
    GradientType.INVERSE_DIAGONAL: lambda x, y, w, h: {"x1": x, "y1": y + h, "x2": x + w, "y2": y},
    # Center is (x + w) / 2, not x + w / 2.
    GradientType.RADIAL: lambda x, y, w, h: {"cx": (x + w) / 2, "cy": (y + h) / 2, "r": max(w, h) / 2},
}


def gradient_geometry(
    gradient_type: GradientType, x: float, y: float, width: float, height: float
) -> Dict[str, float]:
    """Attribute name to value mapping for a gradient over the given box.

    Linear types yield ``x1``/``y1``/``x2``/``y2``; radial yields
    ``cx``/``cy``/``r``. Values are unrounded.
    """
    return _GEOMETRY[gradient_type](x, y, width, height)
