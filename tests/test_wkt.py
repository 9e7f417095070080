"""
Tests for the Well-Known-Text codec.
"""

import math
import unittest

from gpscoords import Coordinate, SingleCoordinate
from gpscoords.geo import wkt


class TestToWkt(unittest.TestCase):
    """Test WKT formatting."""

    def test_longitude_first(self):
        """Test that WKT puts longitude before latitude."""
        self.assertEqual(Coordinate(51.5074, -0.1278).to_wkt(), "POINT (-0.127800 51.507400)")

    def test_invalid_is_empty(self):
        """Test that the invalid value formats as POINT EMPTY."""
        self.assertEqual(Coordinate.NONE.to_wkt(), "POINT EMPTY")
        self.assertEqual(Coordinate(91, 0).to_wkt(), "POINT EMPTY")

    def test_format_point_non_finite(self):
        """Test that any non-finite component gives POINT EMPTY."""
        self.assertEqual(wkt.format_point(math.nan, 1.0), "POINT EMPTY")
        self.assertEqual(wkt.format_point(1.0, math.inf), "POINT EMPTY")


class TestFromWkt(unittest.TestCase):
    """Test WKT decoding."""

    def test_paris(self):
        """Test decoding a known point."""
        coord = Coordinate.from_wkt("POINT (2.3522 48.8566)")
        self.assertAlmostEqual(coord.latitude, 48.8566)
        self.assertAlmostEqual(coord.longitude, 2.3522)

    def test_case_and_whitespace(self):
        """Test case-insensitive matching with flexible whitespace."""
        expected = Coordinate(48.8566, 2.3522)
        for text in [
            "point (2.3522 48.8566)",
            "Point(2.3522 48.8566)",
            "  POINT  (  2.3522\t48.8566  )  ",
            "POINT\n(2.3522   48.8566)",
        ]:
            self.assertEqual(Coordinate.from_wkt(text), expected, text)

    def test_number_forms(self):
        """Test exponent, signed and bare-dot numbers."""
        coord = Coordinate.from_wkt("POINT (1e1 -2.5E1)")
        self.assertEqual(coord.longitude, 10.0)
        self.assertEqual(coord.latitude, -25.0)
        coord = Coordinate.from_wkt("POINT (+.5 -3.)")
        self.assertEqual(coord.longitude, 0.5)
        self.assertEqual(coord.latitude, -3.0)

    def test_empty_point(self):
        """Test that POINT EMPTY decodes to NONE."""
        self.assertEqual(Coordinate.from_wkt("POINT EMPTY"), Coordinate.NONE)
        self.assertEqual(Coordinate.from_wkt("point   empty"), Coordinate.NONE)

    def test_malformed_text_is_invalid(self):
        """Test that decoding never raises and yields the invalid value."""
        for text in [
            None,
            "",
            "   ",
            "POINT",
            "POINT ()",
            "POINT (1)",
            "POINT (1 2 3)",
            "POINT (a b)",
            "POINT (1,2)",
            "POINT (nan nan)",
            "POINT (1_0 2)",
            "POINT (\u0663 \u0664)",
            "POINT (\uff11 \uff12)",
            "LINESTRING (1 2, 3 4)",
            "51.5074,-0.1278",
        ]:
            self.assertEqual(Coordinate.from_wkt(text), Coordinate.NONE, text)

    def test_out_of_range_is_invalid(self):
        """Test that a well-formed point outside the ranges gives NONE."""
        self.assertEqual(Coordinate.from_wkt("POINT (200 10)"), Coordinate.NONE)
        self.assertEqual(Coordinate.from_wkt("POINT (10 -95)"), Coordinate.NONE)

    def test_round_trip_six_decimals(self):
        """Test that text round trips hold six decimals."""
        for coord in [
            Coordinate(51.5074, -0.1278),
            Coordinate(-33.86882, 151.20929),
            Coordinate(90, -180),
            Coordinate(0.0000004, 179.9999996),
        ]:
            restored = Coordinate.from_wkt(coord.to_wkt())
            self.assertAlmostEqual(restored.latitude, coord.latitude, places=6)
            self.assertAlmostEqual(restored.longitude, coord.longitude, places=6)

    def test_keeps_class(self):
        """Test that decoding builds the caller's class."""
        self.assertIsInstance(SingleCoordinate.from_wkt("POINT (1 2)"), SingleCoordinate)
        self.assertIsInstance(SingleCoordinate.from_wkt("junk"), SingleCoordinate)


class TestReadPoint(unittest.TestCase):
    """Test the low-level reader."""

    def test_returns_latitude_first(self):
        """Test the reader's tuple order."""
        self.assertEqual(wkt.read_point("POINT (2 1)"), (1.0, 2.0))

    def test_empty_point_is_nan_pair(self):
        """Test that POINT EMPTY reads as two NaNs."""
        lat, lon = wkt.read_point("POINT EMPTY")
        self.assertTrue(math.isnan(lat))
        self.assertTrue(math.isnan(lon))

    def test_not_a_point(self):
        """Test that other text reads as None."""
        self.assertIsNone(wkt.read_point("POLYGON EMPTY"))
        self.assertIsNone(wkt.read_point(None))


if __name__ == '__main__':
    unittest.main()
