"""
Module for angle unit and coordinate frame conversions
"""
__all__ = ['degrees_to_radians', 'geodetic_to_cartesian']

import math

from slantrange.ellipsoid import ReferenceEllipsoid, WGS84
from slantrange.positions import CartesianPosition, GeodeticPosition


def degrees_to_radians(degrees: float) -> float:
    """Converts an angle in degrees to radians"""
    return degrees * math.pi / 180


def geodetic_to_cartesian(
    position: GeodeticPosition,
    ellipsoid: ReferenceEllipsoid = WGS84,
) -> CartesianPosition:
    """
    Converts a geodetic (latitude, longitude, elevation) position to
    Earth-Centered-Earth-Fixed cartesian coordinates using the closed-form
    transform.

    No range validation is performed; latitudes beyond +/-90 degrees produce a
    mathematically defined but physically meaningless result.

    Args:
        position:
            The geodetic position, in degrees and meters

        ellipsoid:
            (Default WGS84) The reference ellipsoid the position is relative to

    Returns:
        CartesianPosition, in meters
    """
    lat_rad = degrees_to_radians(position.latitude)
    lon_rad = degrees_to_radians(position.longitude)

    sin_lat, cos_lat = math.sin(lat_rad), math.cos(lat_rad)
    sin_lon, cos_lon = math.sin(lon_rad), math.cos(lon_rad)

    e2 = ellipsoid.eccentricity_squared
    n = ellipsoid.semi_major_axis / math.sqrt(1 - e2 * sin_lat * sin_lat)
    h = position.elevation

    return CartesianPosition(
        (n + h) * cos_lat * cos_lon,
        (n + h) * cos_lat * sin_lon,
        ((1 - e2) * n + h) * sin_lat,
    )
