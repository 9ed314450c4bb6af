"""
Representation of a specific point on earth in one of the supported coordinate systems
"""

__all__ = ['Coordinate']

from typing import Tuple, Union

from coordtransform.conversion import BD09, GCJ02, WGS84, convert_coordinate, normalize_crs
from coordtransform.transform import out_of_china


class Coordinate:
    """
    Representation of a coordinate (i.e., a lon/lat pair) tagged with the coordinate
    system it is expressed in.

    Values are not bounded or validated in any way; a Coordinate holds whatever
    longitude and latitude it was given.
    """

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        crs: str = WGS84,
    ):
        self.longitude = float(longitude)
        self.latitude = float(latitude)
        self.crs = normalize_crs(crs)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.longitude == other.longitude and
            self.latitude == other.latitude and
            self.crs == other.crs
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude, self.crs))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude}, {self.crs})>'

    @property
    def in_china(self) -> bool:
        """Whether this coordinate falls within the area where the national offset applies"""
        return not out_of_china(self.longitude, self.latitude)

    def to_crs(self, crs: str) -> 'Coordinate':
        """
        Convert this coordinate to another coordinate system.

        Args:
            crs: (str)
                The target coordinate system, e.g. 'GCJ02' or 'baidu'

        Returns:
            Coordinate
        """
        crs = normalize_crs(crs)
        if crs == self.crs:
            return self

        lng, lat = convert_coordinate(self.longitude, self.latitude, self.crs, crs)
        return Coordinate(lng, lat, crs)

    def to_wgs84(self) -> 'Coordinate':
        return self.to_crs(WGS84)

    def to_gcj02(self) -> 'Coordinate':
        return self.to_crs(GCJ02)

    def to_bd09(self) -> 'Coordinate':
        return self.to_crs(BD09)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_str(self, reverse: bool = False) -> Tuple[str, str]:
        """
        Converts the coordinate to a tuple of strings (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        lng, lat = self.to_float(reverse)
        return str(lng), str(lat)
