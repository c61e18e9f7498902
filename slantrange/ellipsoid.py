"""
Reference ellipsoids used to anchor geodetic coordinates
"""

__all__ = ['ELLIPSOIDS', 'ReferenceEllipsoid', 'WGS84', 'get_ellipsoid']

import math
from typing import Dict, Optional

from pydantic import validate_call

from slantrange._const import WGS84_A, WGS84_B


class ReferenceEllipsoid:
    """
    An oblate ellipsoid of revolution, described by its semi-major (equatorial)
    and semi-minor (polar) axes in meters.

    Args:
        semi_major_axis:
            The equatorial radius, in meters

        semi_minor_axis:
            The polar radius, in meters. Must not exceed the semi-major axis.

        name:
            (Optional) A display name for the ellipsoid
    """

    __slots__ = ('semi_major_axis', 'semi_minor_axis', 'name')

    @validate_call
    def __init__(
        self,
        semi_major_axis: float,
        semi_minor_axis: float,
        name: Optional[str] = None,
    ):
        if semi_major_axis <= 0 or semi_minor_axis <= 0:
            raise ValueError(
                f'Ellipsoid axes must be positive, got a={semi_major_axis}, b={semi_minor_axis}'
            )

        if semi_minor_axis > semi_major_axis:
            raise ValueError(
                f'Semi-minor axis {semi_minor_axis} must not exceed '
                f'semi-major axis {semi_major_axis}'
            )

        object.__setattr__(self, 'semi_major_axis', semi_major_axis)
        object.__setattr__(self, 'semi_minor_axis', semi_minor_axis)
        object.__setattr__(self, 'name', name)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, ReferenceEllipsoid):
            return False

        return (
            self.semi_major_axis == other.semi_major_axis and
            self.semi_minor_axis == other.semi_minor_axis
        )

    def __hash__(self):
        return hash((self.semi_major_axis, self.semi_minor_axis))

    def __repr__(self):
        name = f'{self.name}: ' if self.name else ''
        return f'<ReferenceEllipsoid({name}{self.semi_major_axis}, {self.semi_minor_axis})>'

    @property
    def eccentricity_squared(self) -> float:
        """The first eccentricity squared, e^2 = 1 - (b^2 / a^2)"""
        return 1 - (self.semi_minor_axis ** 2) / (self.semi_major_axis ** 2)

    @property
    def eccentricity(self) -> float:
        return math.sqrt(self.eccentricity_squared)

    @property
    def flattening(self) -> float:
        return (self.semi_major_axis - self.semi_minor_axis) / self.semi_major_axis

    def prime_vertical_radius(self, latitude_radians: float) -> float:
        """
        The radius of curvature in the prime vertical, N, at a given latitude.

        Args:
            latitude_radians:
                The geodetic latitude, in radians

        Returns:
            N, in meters
        """
        sin_lat = math.sin(latitude_radians)
        return self.semi_major_axis / math.sqrt(
            1 - self.eccentricity_squared * sin_lat * sin_lat
        )


WGS84 = ReferenceEllipsoid(WGS84_A, WGS84_B, name='WGS84')

ELLIPSOIDS: Dict[str, ReferenceEllipsoid] = {
    'wgs84': WGS84,
}


def get_ellipsoid(name: str) -> ReferenceEllipsoid:
    """
    Look up a named reference ellipsoid.

    Args:
        name:
            The ellipsoid name (case-insensitive), e.g. 'WGS84'

    Returns:
        ReferenceEllipsoid
    """
    key = name.lower()
    if key not in ELLIPSOIDS:
        raise ValueError(f"Unknown ellipsoid '{name}'. Options: {list(ELLIPSOIDS.keys())}")

    return ELLIPSOIDS[key]
