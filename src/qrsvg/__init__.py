"""Public API for qrsvg."""
from .backend import (
    BackEndError,
    MissingCapabilityError,
    NotInitializedError,
    SvgImageBackEnd,
    UnbalancedLevelError,
    UnsupportedOperationError,
    format_number,
    fragment_decoration,
    serialize_path_data,
)
from .color import Alpha, Color, Rgb, format_color, parse_color, resolve_alpha
from .gradient import Gradient, GradientType, gradient_geometry
from .path import Close, Curve, EllipticArc, Line, Move, Path, PathOperation
from .resources import badge_decoration, load_badge

__all__ = [
    "SvgImageBackEnd",
    "BackEndError",
    "NotInitializedError",
    "UnsupportedOperationError",
    "MissingCapabilityError",
    "UnbalancedLevelError",
    "format_number",
    "fragment_decoration",
    "serialize_path_data",
    "Color",
    "Rgb",
    "Alpha",
    "format_color",
    "parse_color",
    "resolve_alpha",
    "Gradient",
    "GradientType",
    "gradient_geometry",
    "Path",
    "PathOperation",
    "Move",
    "Line",
    "EllipticArc",
    "Curve",
    "Close",
    "badge_decoration",
    "load_badge",
]
