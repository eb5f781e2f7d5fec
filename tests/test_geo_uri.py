"""
Tests for the GeoURI codec.
"""

import unittest

from geocoord import (
    Coordinate,
    ElevationCoordinate,
    MalformedCoordinateError,
    RangeError,
    SchemeError,
    parse_geo_uri,
    to_geo_uri,
)
from geocoord.unit import Meter


class TestParseGeoUri(unittest.TestCase):
    """Test parse_geo_uri."""

    def test_plain(self):
        """Test parsing a two-field URI."""
        self.assertEqual(parse_geo_uri("geo:25.25,-80.125"), Coordinate(25.25, -80.125))
        self.assertEqual(parse_geo_uri("geo:25,-80"), Coordinate(25, -80))

    def test_elevation(self):
        """Test parsing a three-field URI."""
        location = parse_geo_uri("geo:25.25,-80.125,50")
        self.assertIsInstance(location, ElevationCoordinate)
        self.assertEqual(location, ElevationCoordinate(Coordinate(25.25, -80.125), Meter(50)))

    def test_parameters_ignored(self):
        """Test that parameters after ';' are discarded."""
        self.assertEqual(parse_geo_uri("geo:25.25,-80.125;u=35"), Coordinate(25.25, -80.125))
        self.assertEqual(
            parse_geo_uri("geo:25.25,-80.125,10;crs=wgs84;u=5"),
            ElevationCoordinate.from_deg(25.25, -80.125, 10),
        )

    def test_scheme_case(self):
        """Test that the scheme is case-insensitive."""
        self.assertEqual(parse_geo_uri("GEO:1,2"), Coordinate(1, 2))

    def test_wrong_scheme(self):
        """Test that other schemes are rejected."""
        for text in ["geography:25.250,-80.125", "http://example.com", "25.25,-80.125"]:
            with self.assertRaises(SchemeError):
                parse_geo_uri(text)

    def test_out_of_range(self):
        """Test that parsed values are range-checked."""
        for text in ["geo:91,0", "geo:-91,0", "geo:0,181", "geo:0,-181"]:
            with self.assertRaises(RangeError):
                parse_geo_uri(text)

    def test_field_count(self):
        """Test that only two or three fields are accepted."""
        for text in ["geo:25", "geo:", "geo:1,2,3,4"]:
            with self.assertRaises(MalformedCoordinateError):
                parse_geo_uri(text)

    def test_bad_numbers(self):
        """Test that fields must be decimal numbers."""
        for text in ["geo:a,b", "geo:1,", "geo:nan,0", "geo:0,inf", "geo:1_0,0", "geo: 1,2"]:
            with self.assertRaises(MalformedCoordinateError):
                parse_geo_uri(text)

    def test_coordinate_constructors(self):
        """Test the per-kind constructors."""
        self.assertEqual(Coordinate.from_geo_uri("geo:1.5,2"), Coordinate(1.5, 2))
        self.assertEqual(ElevationCoordinate.from_geo_uri("geo:1.5,2,3"), ElevationCoordinate.from_deg(1.5, 2, 3))
        with self.assertRaises(MalformedCoordinateError):
            Coordinate.from_geo_uri("geo:1.5,2,3")
        with self.assertRaises(MalformedCoordinateError):
            ElevationCoordinate.from_geo_uri("geo:1.5,2")


class TestToGeoUri(unittest.TestCase):
    """Test to_geo_uri."""

    def test_plain(self):
        """Test serializing a Coordinate."""
        self.assertEqual(to_geo_uri(Coordinate(25.25, -80.125)), "geo:25.25,-80.125")
        self.assertEqual(to_geo_uri(Coordinate(25, -80)), "geo:25,-80")

    def test_elevation(self):
        """Test serializing an ElevationCoordinate."""
        location = ElevationCoordinate.from_deg(25.25, -80.125, 50)
        self.assertEqual(location.to_geo_uri(), "geo:25.25,-80.125,50")
        self.assertEqual(parse_geo_uri(location.to_geo_uri()), location)

    def test_round_trip(self):
        """Test that parse and serialize are inverses."""
        for text in ["geo:25.25,-80.125", "geo:25,-80", "geo:-0.000001,179.999999", "geo:1,2,-3.25"]:
            self.assertEqual(to_geo_uri(parse_geo_uri(text)), text)

    def test_parameters_dropped(self):
        """Test that parameters are never emitted."""
        self.assertEqual(to_geo_uri(parse_geo_uri("geo:25.25,-80.125;u=35")), "geo:25.25,-80.125")


if __name__ == "__main__":
    unittest.main()
