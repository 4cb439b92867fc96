"""Immutable path model shared by every image backend."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union


@dataclass(frozen=True)
class Move:
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    x: float
    y: float


@dataclass(frozen=True)
class EllipticArc:
    x_radius: float
    y_radius: float
    x_axis_angle: float
    large_arc: bool
    sweep: bool
    x: float
    y: float


@dataclass(frozen=True)
class Curve:
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float


@dataclass(frozen=True)
class Close:
    pass


PathOperation = Union[Move, Line, EllipticArc, Curve, Close]


@dataclass(frozen=True)
class Path:
    """Ordered drawing operations describing one filled shape.

    Builder methods never mutate; each returns a new path so a partially
    built shape can be reused as the prefix of several others.
    """

    operations: Tuple[PathOperation, ...] = ()

    @classmethod
    def of(cls, operations: Iterable[PathOperation]) -> "Path":
        return cls(tuple(operations))

    def move(self, x: float, y: float) -> "Path":
        return self._with(Move(x, y))

    def line(self, x: float, y: float) -> "Path":
        return self._with(Line(x, y))

    def elliptic_arc(
        self,
        x_radius: float,
        y_radius: float,
        x_axis_angle: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
    ) -> "Path":
        return self._with(EllipticArc(x_radius, y_radius, x_axis_angle, large_arc, sweep, x, y))

    def curve(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> "Path":
        return self._with(Curve(x1, y1, x2, y2, x3, y3))

    def close(self) -> "Path":
        return self._with(Close())

    def append(self, other: "Path") -> "Path":
        return Path(self.operations + tuple(other))

    def translate(self, dx: float, dy: float) -> "Path":
        """Return a copy with every absolute point shifted by (dx, dy).

        Radii and arc angles are unaffected.
        """
        return Path(tuple(_translate_operation(op, dx, dy) for op in self.operations))

    def _with(self, operation: PathOperation) -> "Path":
        return Path(self.operations + (operation,))

    def __iter__(self) -> Iterator[PathOperation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)


def _translate_operation(op: PathOperation, dx: float, dy: float) -> PathOperation:
    if isinstance(op, Move):
        return Move(op.x + dx, op.y + dy)
    if isinstance(op, Line):
        return Line(op.x + dx, op.y + dy)
    if isinstance(op, EllipticArc):
        return EllipticArc(
            op.x_radius,
            op.y_radius,
            op.x_axis_angle,
            op.large_arc,
            op.sweep,
            op.x + dx,
            op.y + dy,
        )
    if isinstance(op, Curve):
        return Curve(op.x1 + dx, op.y1 + dy, op.x2 + dx, op.y2 + dy, op.x3 + dx, op.y3 + dy)
    if isinstance(op, Close):
        return op
    raise TypeError(f"cannot translate path operation {type(op).__name__}")
