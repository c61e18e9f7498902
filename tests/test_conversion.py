import math

import pytest
from pytest import approx

from slantrange import CartesianPosition, GeodeticPosition, ReferenceEllipsoid, WGS84
from slantrange.conversion import *

from tests.functions import assert_positions_equal


def test_degrees_to_radians():
    assert degrees_to_radians(0.) == 0.
    assert degrees_to_radians(180.) == approx(math.pi)
    assert degrees_to_radians(-90.) == approx(-math.pi / 2)
    assert degrees_to_radians(360.) == approx(2 * math.pi)


def test_geodetic_to_cartesian_equator_prime_meridian():
    actual = geodetic_to_cartesian(GeodeticPosition(0., 0., 0.))
    assert actual == CartesianPosition(6378137.0, 0., 0.)


def test_geodetic_to_cartesian_equator_quadrants():
    assert_positions_equal(
        geodetic_to_cartesian(GeodeticPosition(0., 90., 0.)),
        CartesianPosition(0., 6378137.0, 0.),
        abs_tol=1e-3
    )
    assert_positions_equal(
        geodetic_to_cartesian(GeodeticPosition(0., 180., 0.)),
        CartesianPosition(-6378137.0, 0., 0.),
        abs_tol=1e-3
    )
    assert_positions_equal(
        geodetic_to_cartesian(GeodeticPosition(0., -90., 0.)),
        CartesianPosition(0., -6378137.0, 0.),
        abs_tol=1e-3
    )


def test_geodetic_to_cartesian_poles():
    e2 = WGS84.eccentricity_squared
    polar_radius = (1 - e2) * WGS84.prime_vertical_radius(math.pi / 2)

    north = geodetic_to_cartesian(GeodeticPosition(90., 0., 0.))
    assert north.x == approx(0., abs=1e-3)
    assert north.y == approx(0., abs=1e-3)
    assert north.z == approx(polar_radius, abs=1e-3)
    assert north.z == approx(6356752.0, abs=1e-3)

    south = geodetic_to_cartesian(GeodeticPosition(-90., 0., 0.))
    assert south.z == approx(-6356752.0, abs=1e-3)


def test_geodetic_to_cartesian_elevation():
    # At the equator, elevation adds directly to the x axis
    actual = geodetic_to_cartesian(GeodeticPosition(0., 0., 1000.))
    assert actual == CartesianPosition(6379137.0, 0., 0.)

    # Negative elevation is below the ellipsoid
    actual = geodetic_to_cartesian(GeodeticPosition(0., 0., -1000.))
    assert actual == CartesianPosition(6377137.0, 0., 0.)

    # At the pole, elevation adds to the z axis
    actual = geodetic_to_cartesian(GeodeticPosition(90., 0., 500.))
    assert actual.z == approx(6357252.0, abs=1e-3)


def test_geodetic_to_cartesian_height_above_surface():
    lat, lon, h = 37.5, -122.25, 1234.5
    surface = geodetic_to_cartesian(GeodeticPosition(lat, lon, 0.))
    elevated = geodetic_to_cartesian(GeodeticPosition(lat, lon, h))

    # The elevated point sits h meters along the ellipsoid normal
    assert surface.distance_to(elevated) == approx(h, abs=1e-6)

    normal = (
        math.cos(math.radians(lat)) * math.cos(math.radians(lon)),
        math.cos(math.radians(lat)) * math.sin(math.radians(lon)),
        math.sin(math.radians(lat)),
    )
    for s, e, n in zip(surface.to_float(), elevated.to_float(), normal):
        assert e - s == approx(h * n, abs=1e-6)


def test_geodetic_to_cartesian_surface_on_ellipsoid():
    a, b = WGS84.semi_major_axis, WGS84.semi_minor_axis
    for lat, lon in [(10., 20.), (-45., 170.), (89.9, -3.), (-33.3, -71.6)]:
        p = geodetic_to_cartesian(GeodeticPosition(lat, lon, 0.))
        assert (p.x ** 2 + p.y ** 2) / a ** 2 + p.z ** 2 / b ** 2 == approx(1., abs=1e-12)


def test_geodetic_to_cartesian_eiffel_tower():
    radar = GeodeticPosition(48.8584, 2.2945, 330.0)
    assert_positions_equal(
        geodetic_to_cartesian(radar),
        CartesianPosition(4201152.876091748, 168331.799222542, 4780461.221664378),
    )


def test_geodetic_to_cartesian_idempotent():
    pos = GeodeticPosition(-12.3456, 98.7654, 321.0)
    assert geodetic_to_cartesian(pos).to_float() == geodetic_to_cartesian(pos).to_float()


def test_geodetic_to_cartesian_custom_ellipsoid():
    sphere = ReferenceEllipsoid(6371000.0, 6371000.0)
    actual = geodetic_to_cartesian(GeodeticPosition(90., 0., 0.), ellipsoid=sphere)
    assert actual.z == approx(6371000.0, abs=1e-6)

    actual = GeodeticPosition(45., 45., 0.).to_cartesian(ellipsoid=sphere)
    assert_positions_equal(
        actual,
        CartesianPosition(3185500.0, 3185500.0, 6371000.0 * math.sqrt(2) / 2),
    )


def test_geodetic_to_cartesian_unvalidated_input():
    # Out-of-range latitude is transformed, not rejected
    actual = geodetic_to_cartesian(GeodeticPosition(100., 0., 0.))
    assert math.isfinite(actual.x)

    actual = geodetic_to_cartesian(GeodeticPosition(float('nan'), 0., 0.))
    assert math.isnan(actual.x)
    assert math.isnan(actual.z)


def test_to_cartesian_matches_function():
    pos = GeodeticPosition(51.4779, -0.0015, 45.)
    assert pos.to_cartesian() == geodetic_to_cartesian(pos)
