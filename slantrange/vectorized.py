"""
Array-based counterparts of the scalar transforms, for converting or ranging
many points at once
"""

__all__ = ['geodetic_to_cartesian_array', 'slant_range_array']

from typing import Iterable, Union

import numpy as np
from numpy.linalg import norm

from slantrange.ellipsoid import ReferenceEllipsoid, WGS84
from slantrange.positions import CartesianPosition, GeodeticPosition


def geodetic_to_cartesian_array(
    latitude,
    longitude,
    elevation,
    ellipsoid: ReferenceEllipsoid = WGS84,
) -> np.ndarray:
    """
    Converts geodetic coordinates to ECEF cartesian coordinates element-wise.

    The three inputs may be scalars or array-likes of any shape, so long as they
    broadcast together.

    Args:
        latitude:
            Latitude(s), in degrees

        longitude:
            Longitude(s), in degrees

        elevation:
            Elevation(s) above the ellipsoid, in meters

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        An array of shape (..., 3) holding x, y, z in meters
    """
    lat = np.asarray(latitude, dtype=float) * np.pi / 180
    lon = np.asarray(longitude, dtype=float) * np.pi / 180
    h = np.asarray(elevation, dtype=float)

    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    sin_lon, cos_lon = np.sin(lon), np.cos(lon)

    e2 = ellipsoid.eccentricity_squared
    n = ellipsoid.semi_major_axis / np.sqrt(1 - e2 * sin_lat * sin_lat)

    x = (n + h) * cos_lat * cos_lon
    y = (n + h) * cos_lat * sin_lon
    z = ((1 - e2) * n + h) * sin_lat
    return np.stack(np.broadcast_arrays(x, y, z), axis=-1)


def _as_point_array(points: Union[np.ndarray, Iterable[CartesianPosition]]) -> np.ndarray:
    """Coerce an array-like or iterable of CartesianPositions to an (n, 3) float array"""
    if not isinstance(points, np.ndarray):
        points = [
            point.to_float() if isinstance(point, CartesianPosition) else point
            for point in points
        ]

    arr = np.asarray(points, dtype=float)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 3) if arr.size == 0 else arr.reshape(1, -1)

    if arr.shape[-1] != 3:
        raise ValueError(f'Cartesian points must have shape (n, 3), got {arr.shape}')

    return arr


def slant_range_array(
    geodetic_position: GeodeticPosition,
    cartesian_points: Union[np.ndarray, Iterable[CartesianPosition]],
    ellipsoid: ReferenceEllipsoid = WGS84,
) -> np.ndarray:
    """
    Calculate the slant range from one geodetic observer to many cartesian points.

    Args:
        geodetic_position:
            The observer

        cartesian_points:
            Either an (n, 3) array-like of ECEF x, y, z values or an iterable
            of CartesianPositions

        ellipsoid:
            (Default WGS84) The reference ellipsoid of the geodetic position

    Returns:
        An (n,) array of distances in meters
    """
    origin = geodetic_to_cartesian_array(
        geodetic_position.latitude,
        geodetic_position.longitude,
        geodetic_position.elevation,
        ellipsoid=ellipsoid,
    )
    return norm(_as_point_array(cartesian_points) - origin, axis=-1)
