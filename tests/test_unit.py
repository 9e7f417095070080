"""
Tests for the unit types returned by coordinate math.
"""

import math
import unittest

from gpscoords.unit import Degree, Kilometer, Meter, Radian, Unit


class TestUnitFamilies(unittest.TestCase):
    """Test ROOT assignment and family checks."""

    def test_roots(self):
        """Test the family root of each unit."""
        self.assertIs(Meter.ROOT, Meter)
        self.assertIs(Kilometer.ROOT, Meter)
        self.assertIs(Radian.ROOT, Radian)
        self.assertIs(Degree.ROOT, Radian)

    def test_custom_family(self):
        """Test declaring a new family."""
        class Length(Unit):
            IS_FAMILY_ROOT = True

        class Foot(Length):
            pass

        self.assertIs(Foot.ROOT, Length)

    def test_cross_family_operations_fail(self):
        """Test that mixing families raises TypeError."""
        with self.assertRaises(TypeError):
            Meter(1) + Radian(1)
        with self.assertRaises(TypeError):
            Meter(1) < Degree(1)
        with self.assertRaises(TypeError):
            Meter(1).to(Degree)


class TestConversions(unittest.TestCase):
    """Test SI storage and conversion."""

    def test_si_storage(self):
        """Test that values are stored in SI units."""
        self.assertEqual(float(Kilometer(1.5)), 1500.0)
        self.assertAlmostEqual(float(Degree(180)), math.pi)

    def test_to(self):
        """Test converting to another unit of the family."""
        self.assertEqual(Kilometer(2).to(Meter), 2000.0)
        self.assertAlmostEqual(Radian(math.pi / 2).to(Degree), 90.0)

    def test_as_unit(self):
        """Test re-wrapping a value in another unit."""
        converted = Meter(1500).as_unit(Kilometer)
        self.assertIsInstance(converted, Kilometer)
        self.assertEqual(str(converted), "1.5 km")


class TestArithmetic(unittest.TestCase):
    """Test operations within a family and with plain numbers."""

    def test_same_family(self):
        """Test addition and subtraction within a family."""
        total = Meter(500) + Kilometer(1)
        self.assertIsInstance(total, Meter)
        self.assertEqual(float(total), 1500.0)
        self.assertEqual(float(Kilometer(1) - Meter(250)), 750.0)

    def test_scalars(self):
        """Test scaling by plain numbers."""
        self.assertEqual(float(Meter(10) * 2), 20.0)
        self.assertEqual(float(3 * Meter(10)), 30.0)
        self.assertEqual(float(Meter(10) / 4), 2.5)
        with self.assertRaises(TypeError):
            Meter(10) * Meter(2)

    def test_comparisons(self):
        """Test ordering across units and with numbers."""
        self.assertTrue(Meter(999) < Kilometer(1))
        self.assertTrue(Kilometer(1) == Meter(1000))
        self.assertTrue(Meter(5) == 5.0)
        self.assertTrue(Meter(5) > 4)

    def test_hashable(self):
        """Test that units hash like floats."""
        self.assertEqual(hash(Meter(5)), hash(5.0))

    def test_nan_propagates(self):
        """Test NaN behaviour."""
        self.assertTrue(math.isnan(Meter(math.nan)))
        self.assertFalse(Meter(math.nan) == Meter(math.nan))

    def test_sign(self):
        """Test negation and absolute value."""
        self.assertEqual(float(-Radian(1)), -1.0)
        self.assertIsInstance(abs(Radian(-1)), Radian)


if __name__ == '__main__':
    unittest.main()
