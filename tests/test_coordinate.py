"""
Tests for the Coordinate and ElevationCoordinate value types.
"""

import dataclasses
import math
import unittest

from geocoord import Coordinate, ElevationCoordinate, RangeError
from geocoord.unit import Degree, Kilometer, Meter


class TestCoordinateConstruction(unittest.TestCase):
    """Test validation at construction."""

    def test_valid_bounds(self):
        """Test that the exact bounds are accepted."""
        for lat, lon in [(90, 180), (-90, -180), (0, 0), (45.5, -122.25)]:
            c = Coordinate(lat, lon)
            self.assertEqual(c.latitude, float(lat))
            self.assertEqual(c.longitude, float(lon))

    def test_out_of_range(self):
        """Test that out-of-range components fail construction."""
        for lat, lon in [(91, 0), (-91, 0), (0, 181), (0, -181), (90.0000001, 0)]:
            with self.assertRaises(RangeError):
                Coordinate(lat, lon)

    def test_non_finite(self):
        """Test that NaN and infinities are rejected."""
        for lat, lon in [(math.nan, 0), (0, math.inf), (-math.inf, 0)]:
            with self.assertRaises(RangeError):
                Coordinate(lat, lon)

    def test_range_error_is_value_error(self):
        """Test that callers can catch RangeError as ValueError."""
        with self.assertRaises(ValueError):
            Coordinate(0, 200)

    def test_components_are_floats(self):
        """Test that integer input is stored as float."""
        c = Coordinate(25, -80)
        self.assertIsInstance(c.latitude, float)
        self.assertIsInstance(c.longitude, float)

    def test_immutable(self):
        """Test that a Coordinate cannot be modified."""
        c = Coordinate(25, -80)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            c.latitude = 26.0

    def test_from_rad(self):
        """Test construction from radians."""
        c = Coordinate.from_rad(math.pi / 4, -math.pi / 2)
        self.assertAlmostEqual(c.latitude, 45.0)
        self.assertAlmostEqual(c.longitude, -90.0)


class TestCoordinateEquality(unittest.TestCase):
    """Test exact equality and hashing."""

    def test_equals(self):
        """Test equality on both fields."""
        a = Coordinate(25.250, -80.125)
        b = Coordinate(25.250, -80.125)
        self.assertEqual(a, a)
        self.assertEqual(a, b)
        self.assertNotEqual(a, Coordinate(25.750, -80.125))
        self.assertNotEqual(a, Coordinate(25.250, -80.500))
        self.assertNotEqual(a, None)
        self.assertNotEqual(a, "not a coordinate")

    def test_no_tolerance(self):
        """Test that nearly equal coordinates differ."""
        self.assertNotEqual(Coordinate(0.1 + 0.2, 0), Coordinate(0.3, 0))

    def test_signed_zero(self):
        """Test that 0.0 and -0.0 are different values."""
        self.assertNotEqual(Coordinate(-0.0, 0), Coordinate(0.0, 0))

    def test_hash(self):
        """Test use in sets."""
        s = {
            Coordinate(25.250, -80.125),
            Coordinate(25.750, -80.125),
            Coordinate(25.250, -80.500),
            Coordinate(25.250, -80.125),
        }
        self.assertEqual(len(s), 3)

    def test_no_ordering(self):
        """Test that coordinates cannot be ordered."""
        with self.assertRaises(TypeError):
            Coordinate(0, 0) < Coordinate(1, 1)


class TestCoordinateDisplay(unittest.TestCase):
    """Test the text form."""

    def test_to_string(self):
        """Test shortest decimal rendering."""
        self.assertEqual(str(Coordinate(25.25, 80.125)), "25.25º, 80.125º")
        self.assertEqual(str(Coordinate(25.0, -80)), "25º, -80º")
        self.assertEqual(str(Coordinate(25.050, 0.5)), "25.05º, 0.5º")

    def test_small_values_without_exponent(self):
        """Test that tiny values are written positionally."""
        self.assertEqual(str(Coordinate(1e-7, 0)), "0.0000001º, 0º")


class TestCoordinateShortcuts(unittest.TestCase):
    """Test the convenience methods delegating to the engine."""

    def test_distance_and_bearing(self):
        """Test distance_to and bearing_to."""
        a = Coordinate(0, -81)
        b = Coordinate(0, -80)
        self.assertAlmostEqual(float(a.distance_to(b)), 111319.49, delta=0.01)
        self.assertAlmostEqual(a.distance_squared_to(b), float(a.distance_to(b)) ** 2, delta=1e-3)
        self.assertAlmostEqual(a.bearing_to(b).to(Degree), 90.0)

    def test_forward(self):
        """Test projecting a new coordinate."""
        p = Coordinate(0, 0).forward(Degree(0), Kilometer(10))
        self.assertIsInstance(p, Coordinate)
        self.assertAlmostEqual(float(Coordinate(0, 0).distance_to(p)), 10000.0, delta=1e-6)

    def test_geo_uri(self):
        """Test GeoURI round trip through the type."""
        c = Coordinate.from_geo_uri("geo:25.25,-80.125")
        self.assertEqual(c, Coordinate(25.25, -80.125))
        self.assertEqual(c.to_geo_uri(), "geo:25.25,-80.125")


class TestElevationCoordinate(unittest.TestCase):
    """Test the elevation extension."""

    def test_composition(self):
        """Test that the base position is embedded."""
        e = ElevationCoordinate(Coordinate(50, 20), Meter(0))
        self.assertEqual(e.position, Coordinate(50, 20))
        self.assertEqual(e.latitude, 50.0)
        self.assertEqual(e.longitude, 20.0)

    def test_elevation_units(self):
        """Test that elevation is stored as Meter whatever it is given in."""
        self.assertIsInstance(ElevationCoordinate.from_deg(0, 0, 100).elevation, Meter)
        e = ElevationCoordinate.from_deg(0, 0, Kilometer(1.5))
        self.assertIs(type(e.elevation), Meter)
        self.assertEqual(float(e.elevation), 1500.0)

    def test_elevation_must_be_length(self):
        """Test that an angle is not accepted as elevation."""
        with self.assertRaises(TypeError):
            ElevationCoordinate.from_deg(0, 0, Degree(10))

    def test_elevation_must_be_finite(self):
        """Test that a non-finite elevation is rejected."""
        with self.assertRaises(RangeError):
            ElevationCoordinate.from_deg(0, 0, math.inf)

    def test_position_validated(self):
        """Test that the base position is validated."""
        with self.assertRaises(RangeError):
            ElevationCoordinate.from_deg(91, 0, 0)

    def test_equality(self):
        """Test that equality needs both position and elevation."""
        a = ElevationCoordinate.from_deg(50, 20, 0)
        self.assertEqual(a, ElevationCoordinate.from_deg(50, 20, 0))
        self.assertNotEqual(a, ElevationCoordinate.from_deg(50, 20, 1))
        self.assertNotEqual(a, ElevationCoordinate.from_deg(50, 21, 0))
        self.assertNotEqual(a, Coordinate(50, 20))
        self.assertEqual(len({a, ElevationCoordinate.from_deg(50, 20, 0), Coordinate(50, 20)}), 2)

    def test_to_string(self):
        """Test that display appends the elevation."""
        self.assertEqual(str(ElevationCoordinate.from_deg(50, 20, 0)), "50º, 20º, 0m")
        self.assertEqual(str(ElevationCoordinate.from_deg(25.25, -80.125, -3.5)), "25.25º, -80.125º, -3.5m")

    def test_forward_keeps_elevation(self):
        """Test that projection keeps the elevation."""
        e = ElevationCoordinate.from_deg(10, 10, 250)
        moved = e.forward(Degree(90), Meter(1000))
        self.assertIsInstance(moved, ElevationCoordinate)
        self.assertEqual(moved.elevation, Meter(250))


if __name__ == "__main__":
    unittest.main()
