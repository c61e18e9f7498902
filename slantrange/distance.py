"""
Straight-line distance calculations between positions
"""

__all__ = ['euclidean_distance', 'slant_range']

import math

from slantrange.conversion import geodetic_to_cartesian
from slantrange.ellipsoid import ReferenceEllipsoid, WGS84
from slantrange.positions import CartesianPosition, GeodeticPosition


def euclidean_distance(point1: CartesianPosition, point2: CartesianPosition) -> float:
    """Calculate the 3-D euclidean distance between two cartesian positions, in meters."""
    dx = point2.x - point1.x
    dy = point2.y - point1.y
    dz = point2.z - point1.z

    return math.sqrt(dx * dx + dy * dy + dz * dz)


def slant_range(
    geodetic_position: GeodeticPosition,
    cartesian_position: CartesianPosition,
    ellipsoid: ReferenceEllipsoid = WGS84,
) -> float:
    """
    Calculate the slant range (straight-line distance through space, not along
    the surface) between an observer in geodetic coordinates and an object in
    ECEF cartesian coordinates.

    Args:
        geodetic_position:
            The observer, e.g. a ground radar

        cartesian_position:
            The observed object, e.g. a satellite

        ellipsoid:
            (Default WGS84) The reference ellipsoid of the geodetic position

    Returns:
        float: The distance in meters
    """
    return euclidean_distance(
        geodetic_to_cartesian(geodetic_position, ellipsoid=ellipsoid),
        cartesian_position,
    )
