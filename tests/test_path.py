from __future__ import annotations

import sys
import unittest
from pathlib import Path as FsPath

TESTS_DIR = FsPath(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from qrsvg.path import Close, Curve, EllipticArc, Line, Move, Path


class PathTests(unittest.TestCase):
    def test_builder_returns_new_paths(self) -> None:
        base = Path().move(0, 0)
        square = base.line(1, 0).line(1, 1).close()
        self.assertEqual(len(base), 1)
        self.assertEqual(list(square), [Move(0, 0), Line(1, 0), Line(1, 1), Close()])

    def test_structural_equality(self) -> None:
        a = Path().move(1, 2).curve(1, 2, 3, 4, 5, 6)
        b = Path.of([Move(1, 2), Curve(1, 2, 3, 4, 5, 6)])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_append_concatenates(self) -> None:
        first = Path().move(0, 0).line(2, 0)
        second = Path().move(5, 5).close()
        self.assertEqual(
            list(first.append(second)),
            [Move(0, 0), Line(2, 0), Move(5, 5), Close()],
        )

    def test_translate_shifts_points_but_not_radii(self) -> None:
        path = Path().move(1, 1).elliptic_arc(3, 4, 30, True, False, 5, 6).curve(0, 0, 1, 1, 2, 2).close()
        moved = path.translate(10, -1)
        self.assertEqual(
            list(moved),
            [
                Move(11, 0),
                EllipticArc(3, 4, 30, True, False, 15, 5),
                Curve(10, -1, 11, 0, 12, 1),
                Close(),
            ],
        )
        self.assertEqual(list(path)[0], Move(1, 1))


if __name__ == "__main__":
    unittest.main()
