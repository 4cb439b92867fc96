"""SVG image back end: turns drawing calls into an SVG 1.1 document."""
from __future__ import annotations

import logging
import math
from copy import deepcopy
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, Dict, Iterable, List, Optional

try:
    import xml.etree.ElementTree as ET
except ImportError:  # pragma: no cover - stripped-down interpreters only
    ET = None  # type: ignore[assignment]

from .color import OPAQUE, Color, alpha_of, format_color, resolve_alpha
from .gradient import Gradient, gradient_geometry
from .path import Close, Curve, EllipticArc, Line, Move, Path, PathOperation

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"
PRECISION = 3
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
_STEP = Decimal(1).scaleb(-PRECISION)
_CONTEXT = Context(prec=64)

if ET is not None:
    ET.register_namespace("", SVG_NS)

Decoration = Callable[["ET.Element", float], None]


class BackEndError(RuntimeError):
    """Base class for back end failures; ``code`` is stable for callers."""

    code = "E_BACKEND"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotInitializedError(BackEndError):
    """Raised on calls made with no document in progress, or on a second open."""

    code = "E_NOT_INITIALIZED"


class UnsupportedOperationError(BackEndError):
    code = "E_UNSUPPORTED_OPERATION"


class MissingCapabilityError(BackEndError):
    code = "E_MISSING_CAPABILITY"


class UnbalancedLevelError(BackEndError):
    code = "E_UNBALANCED_LEVEL"


def _q(tag: str) -> str:
    return f"{{{SVG_NS}}}{tag}"


def _require_xml() -> None:
    if ET is None:
        logger.error("xml.etree.ElementTree is not available")
        raise MissingCapabilityError(
            "the SVG back end needs xml.etree.ElementTree; install a Python build with XML support"
        )


def format_number(value: float) -> str:
    """Round half away from zero to three decimals and drop trailing zeros.

    ``1.20`` -> ``1.2``, ``0.0625`` -> ``0.063``. Rounding works on the
    shortest decimal repr, so ``1.0005`` rounds up even though its binary
    value sits just below the tie.
    """
    if not math.isfinite(value):
        logger.error("cannot format non-finite number %r", value)
        raise ValueError(f"cannot format non-finite number {value!r}")
    rounded = Decimal(repr(float(value))).quantize(_STEP, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = format(rounded, "f").rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _numbers(*values: float) -> str:
    return " ".join(format_number(value) for value in values)


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _path_token(op: PathOperation) -> str:
    if isinstance(op, Move):
        return "M" + _numbers(op.x, op.y)
    if isinstance(op, Line):
        return "L" + _numbers(op.x, op.y)
    if isinstance(op, EllipticArc):
        return "A{} {} {} {} {}".format(
            _numbers(op.x_radius, op.y_radius, op.x_axis_angle),
            _flag(op.large_arc),
            _flag(op.sweep),
            format_number(op.x),
            format_number(op.y),
        )
    if isinstance(op, Curve):
        return "C" + _numbers(op.x1, op.y1, op.x2, op.y2, op.x3, op.y3)
    if isinstance(op, Close):
        return "Z"
    logger.error("unexpected draw operation %r", op)
    raise UnsupportedOperationError(f"Unexpected draw operation: {type(op).__name__}")


def serialize_path_data(path: Iterable[PathOperation]) -> str:
    """Build the ``d`` attribute for a path; tokens are joined without separators."""
    return "".join(_path_token(op) for op in path)


def fragment_decoration(fragment: str, design_size: Optional[float] = None) -> Decoration:
    """Decoration that copies the children of an SVG fragment onto the document.

    The fragment is parsed once, up front, so malformed markup fails here
    rather than in ``close``. With ``design_size`` the copy is scaled from the
    fragment's own canvas to the document size.
    """
    _require_xml()
    source = ET.fromstring(fragment)

    def _decorate(root: ET.Element, size: float) -> None:
        attrs: Dict[str, str] = {}
        if design_size and not math.isclose(size, design_size):
            attrs["transform"] = f"scale({format_number(size / design_size)})"
        group = ET.SubElement(root, _q("g"), attrs)
        for child in source:
            group.append(deepcopy(child))

    return _decorate


class SvgImageBackEnd:
    """Stateful SVG writer driven by a symbol renderer.

    One instance holds at most one document: ``open`` starts it, transform
    and draw calls fill it in, ``close`` returns the text and resets the
    instance. Every ``scale``/``translate``/``rotate`` opens a group on the
    current nesting level; ``pop_level`` closes all groups of that level and
    ``close`` closes whatever is left.

    Args:
        decoration: Called with the root ``svg`` element and the document size
            right before the document is closed. Draws on top of everything.
        indent: Pretty-print the output instead of emitting it compact.
    """

    def __init__(self, *, decoration: Optional[Decoration] = None, indent: bool = False) -> None:
        _require_xml()
        self._decoration = decoration
        self._indent = indent
        self._reset()

    def _reset(self) -> None:
        self._root: Optional[ET.Element] = None
        # Open elements, innermost last. The root svg and the optional link
        # wrapper sit below every group.
        self._elements: List[ET.Element] = []
        self._stack: List[int] = []
        self._gradient_count = 0
        self._size: float = 0

    @property
    def is_open(self) -> bool:
        return self._root is not None

    @property
    def open_groups(self) -> int:
        return sum(self._stack)

    @property
    def depth(self) -> int:
        """Number of nesting levels, the root level included."""
        return len(self._stack)

    def open(self, size: float, background: Color, link: Optional[str] = None) -> None:
        if self._root is not None:
            logger.error("open called while a document is in progress")
            raise NotInitializedError(
                "a document is already in progress; close it or use a new back end"
            )
        if isinstance(size, bool) or not math.isfinite(size) or size <= 0:
            logger.error("invalid document size %r", size)
            raise ValueError(f"size must be a positive number, got {size!r}")

        size_text = format_number(size)
        self._root = ET.Element(
            _q("svg"),
            {
                "version": SVG_VERSION,
                "width": size_text,
                "height": size_text,
                "viewBox": f"0 0 {size_text} {size_text}",
            },
        )
        self._elements = [self._root]
        self._stack = [0]
        self._gradient_count = 0
        self._size = size

        if link:
            self._start("a", {"href": link})
        logger.debug("opened %s x %s document (link=%r)", size_text, size_text, link)

        alpha = resolve_alpha(background)
        if alpha == 0:
            return

        attrs = {
            "x": "0",
            "y": "0",
            "width": size_text,
            "height": size_text,
            "fill": format_color(background),
        }
        if alpha < OPAQUE:
            attrs["fill-opacity"] = format_number(alpha / 100)
        ET.SubElement(self._elements[-1], _q("rect"), attrs)

    def scale(self, factor: float) -> None:
        self._require_open("scale")
        self._open_group(f"scale({format_number(factor)})")

    def translate(self, x: float, y: float) -> None:
        self._require_open("translate")
        self._open_group(f"translate({format_number(x)},{format_number(y)})")

    def rotate(self, degrees: int) -> None:
        self._require_open("rotate")
        self._open_group(f"rotate({int(degrees)})")

    def push_level(self) -> None:
        self._require_open("push_level")
        self._start("g", {})
        self._stack.append(1)

    def pop_level(self) -> None:
        self._require_open("pop_level")
        if len(self._stack) <= 1:
            logger.error("pop_level called on the root level")
            raise UnbalancedLevelError("pop_level called without a matching push_level")
        for _ in range(self._stack.pop()):
            self._end()

    def draw_path_with_color(self, path: Path, color: Color) -> None:
        self._require_open("draw_path_with_color")
        alpha = resolve_alpha(color)
        element = self._path_element(path)
        element.set("fill", format_color(color))
        if alpha < OPAQUE:
            element.set("fill-opacity", format_number(alpha / 100))

    def draw_path_with_gradient(
        self,
        path: Path,
        gradient: Gradient,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        self._require_open("draw_path_with_gradient")
        gradient_id = self.register_gradient(gradient, x, y, width, height)
        element = self._path_element(path)
        element.set("fill", f"url(#{gradient_id})")

    def register_gradient(
        self, gradient: Gradient, x: float, y: float, width: float, height: float
    ) -> str:
        """Emit a gradient definition at the current position and return its id."""
        self._require_open("register_gradient")
        attrs = {"gradientUnits": "userSpaceOnUse"}
        for name, value in gradient_geometry(gradient.type, x, y, width, height).items():
            attrs[name] = format_number(value)
        self._gradient_count += 1
        gradient_id = f"g{self._gradient_count}"
        attrs["id"] = gradient_id

        defs = ET.SubElement(self._elements[-1], _q("defs"))
        tag = "radialGradient" if gradient.is_radial else "linearGradient"
        element = ET.SubElement(defs, _q(tag), attrs)
        _append_stop(element, "0%", gradient.start_color)
        _append_stop(element, "100%", gradient.end_color)
        logger.debug("registered %s gradient %s", gradient.type.value, gradient_id)
        return gradient_id

    def close(self) -> str:
        self._require_open("close")
        root = self._root
        if self._decoration is not None:
            self._decoration(root, self._size)

        for open_groups in reversed(self._stack):
            for _ in range(open_groups):
                self._end()
        self._elements.clear()

        if self._indent:
            ET.indent(root, space="  ")
        blob = XML_DECLARATION + ET.tostring(root, encoding="unicode")
        logger.debug("closed document (%d characters)", len(blob))
        self._reset()
        return blob

    def _require_open(self, action: str) -> None:
        if self._root is None:
            logger.error("%s called with no document in progress", action)
            raise NotInitializedError(f"cannot {action}: no document in progress")

    def _start(self, tag: str, attrs: Dict[str, str]) -> ET.Element:
        element = ET.SubElement(self._elements[-1], _q(tag), attrs)
        self._elements.append(element)
        return element

    def _end(self) -> None:
        self._elements.pop()

    def _open_group(self, transform: str) -> None:
        self._start("g", {"transform": transform})
        self._stack[-1] += 1

    def _path_element(self, path: Path) -> ET.Element:
        data = serialize_path_data(path)
        return ET.SubElement(
            self._elements[-1], _q("path"), {"fill-rule": "evenodd", "d": data}
        )


def _append_stop(gradient_element: ET.Element, offset: str, color: Color) -> None:
    attrs = {"offset": offset, "stop-color": format_color(color)}
    alpha = alpha_of(color)
    # Written for every alpha-capable color, 100 included; solid fills only
    # write fill-opacity below 100.
    if alpha is not None:
        attrs["stop-opacity"] = format_number(alpha / 100)
    ET.SubElement(gradient_element, _q("stop"), attrs)
