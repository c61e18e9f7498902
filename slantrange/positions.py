"""
Representations of a point on (or above) the earth, in geodetic and
Earth-Centered-Earth-Fixed (ECEF) cartesian form
"""

from __future__ import annotations

__all__ = ['CartesianPosition', 'GeodeticPosition']

from typing import Iterable, Optional, Tuple

from pydantic import validate_call

from slantrange.ellipsoid import ReferenceEllipsoid, WGS84
from slantrange.utils.functions import is_finite, round_half_up
from slantrange.utils.logging import warn_once


class _ImmutablePosition:
    """Shared behavior for the three-component position value types"""

    __slots__ = ()

    _FIELDS: Tuple[str, str, str]

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash((self.__class__.__name__, *self.to_float()))

    def __repr__(self):
        return f'<{self.__class__.__name__}({", ".join(map(str, self.to_float()))})>'

    def to_float(self, precision: Optional[int] = None) -> Tuple[float, float, float]:
        """
        Converts the position to a tuple of its three components.

        Args:
            precision: (int)
                (Optional) If provided, rounds (half-up) each component to this
                many decimal places

        Returns:
            Tuple of length 3
        """
        out = tuple(getattr(self, field) for field in self._FIELDS)
        if precision is not None:
            out = tuple(round_half_up(x, precision) for x in out)

        return out  # type: ignore


class GeodeticPosition(_ImmutablePosition):
    """
    A position expressed relative to a reference ellipsoid.

    Latitude and longitude are in decimal degrees, elevation is in meters above
    the ellipsoid surface (and may be negative). Values outside the natural
    geodetic ranges are accepted as-is; a warning is logged once.
    """

    __slots__ = ('latitude', 'longitude', 'elevation')

    _FIELDS = ('latitude', 'longitude', 'elevation')

    @validate_call
    def __init__(self, latitude: float, longitude: float, elevation: float = 0.0):
        object.__setattr__(self, 'latitude', latitude)
        object.__setattr__(self, 'longitude', longitude)
        object.__setattr__(self, 'elevation', elevation)

        if not is_finite((latitude, longitude, elevation)):
            warn_once(
                'GeodeticPosition received a non-finite value; results will be NaN or infinite. '
                '(this warning will not repeat)'
            )
        elif not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            warn_once(
                'GeodeticPosition latitude/longitude outside [-90, 90]/[-180, 180]; '
                'values are not normalized. (this warning will not repeat)'
            )

    def to_cartesian(self, ellipsoid: ReferenceEllipsoid = WGS84) -> CartesianPosition:
        """Convert this position to ECEF cartesian coordinates"""
        from slantrange.conversion import geodetic_to_cartesian  # pylint: disable=import-outside-toplevel

        return geodetic_to_cartesian(self, ellipsoid=ellipsoid)


class CartesianPosition(_ImmutablePosition):
    """
    A position in the Earth-Centered-Earth-Fixed frame, in meters.

    The x axis passes through the prime meridian at the equator, the z axis
    through the north pole, and y completes the right-handed system.
    """

    __slots__ = ('x', 'y', 'z')

    _FIELDS = ('x', 'y', 'z')

    @validate_call
    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)
        object.__setattr__(self, 'z', z)

    @classmethod
    def from_float(cls, values: Iterable[float]) -> CartesianPosition:
        """
        Creates a CartesianPosition from any iterable of three numbers, e.g.
        a tuple or a row of a numpy array.

        Args:
            values:
                The (x, y, z) components, in meters

        Returns:
            CartesianPosition
        """
        parts = [float(x) for x in values]
        if len(parts) != 3:
            raise ValueError(f'Expected 3 components (x, y, z), got {len(parts)}')

        return cls(*parts)

    def distance_to(self, other: CartesianPosition) -> float:
        """The straight-line distance to another cartesian position, in meters"""
        from slantrange.distance import euclidean_distance  # pylint: disable=import-outside-toplevel

        return euclidean_distance(self, other)
