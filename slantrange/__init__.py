from slantrange._version import __version__  # noqa: F401
from slantrange.utils.logging import LOGGER
from slantrange.ellipsoid import ReferenceEllipsoid, WGS84, get_ellipsoid
from slantrange.positions import CartesianPosition, GeodeticPosition
from slantrange.conversion import degrees_to_radians, geodetic_to_cartesian
from slantrange.distance import euclidean_distance, slant_range
from slantrange.vectorized import geodetic_to_cartesian_array, slant_range_array


__all__ = [
    'CartesianPosition',
    'GeodeticPosition',
    'ReferenceEllipsoid',
    'WGS84',
    'degrees_to_radians',
    'euclidean_distance',
    'geodetic_to_cartesian',
    'geodetic_to_cartesian_array',
    'get_ellipsoid',
    'slant_range',
    'slant_range_array',
    'LOGGER',
]
