from __future__ import annotations

import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from qrsvg.color import Alpha, Rgb, alpha_of, format_color, parse_color, resolve_alpha


class ColorTests(unittest.TestCase):
    def test_format_is_lowercase_and_zero_padded(self) -> None:
        self.assertEqual(format_color(Rgb(0, 0, 0)), "#000000")
        self.assertEqual(format_color(Rgb(255, 10, 171)), "#ff0aab")

    def test_alpha_is_not_part_of_hex_string(self) -> None:
        self.assertEqual(format_color(Alpha(40, Rgb(1, 2, 3))), "#010203")

    def test_resolve_alpha_defaults_to_opaque(self) -> None:
        self.assertEqual(resolve_alpha(Rgb(1, 2, 3)), 100)
        self.assertIsNone(alpha_of(Rgb(1, 2, 3)))
        self.assertEqual(resolve_alpha(Alpha(0, Rgb(1, 2, 3))), 0)
        self.assertEqual(alpha_of(Alpha(100, Rgb(1, 2, 3))), 100)

    def test_channel_and_alpha_ranges_are_validated(self) -> None:
        with self.assertRaises(ValueError):
            Rgb(256, 0, 0)
        with self.assertRaises(ValueError):
            Rgb(0, -1, 0)
        with self.assertRaises(ValueError):
            Alpha(101, Rgb(0, 0, 0))

    def test_parse_named_and_hex_colors(self) -> None:
        self.assertEqual(parse_color("white"), Rgb(255, 255, 255))
        self.assertEqual(parse_color("#0f0"), Rgb(0, 255, 0))

    def test_parse_color_with_alpha_channel(self) -> None:
        color = parse_color("#ff000080")
        self.assertEqual(color, Alpha(50, Rgb(255, 0, 0)))

    def test_parse_unknown_color_fails(self) -> None:
        with self.assertRaises(ValueError):
            parse_color("not-a-color")


if __name__ == "__main__":
    unittest.main()
