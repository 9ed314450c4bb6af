
from coordtransform._version import __version__  # noqa: F401
from coordtransform.utils.logging import LOGGER
from coordtransform.conversion import (
    BD09, GCJ02, WGS84, convert_coordinate, get_converter, normalize_crs
)
from coordtransform.coordinates import Coordinate
from coordtransform.transform import (
    bd09_to_gcj02, bd09_to_wgs84, gcj02_to_bd09, gcj02_to_wgs84, out_of_china,
    wgs84_to_bd09, wgs84_to_gcj02
)

__all__ = [
    'BD09',
    'Coordinate',
    'GCJ02',
    'WGS84',
    'bd09_to_gcj02',
    'bd09_to_wgs84',
    'convert_coordinate',
    'gcj02_to_bd09',
    'gcj02_to_wgs84',
    'get_converter',
    'normalize_crs',
    'out_of_china',
    'wgs84_to_bd09',
    'wgs84_to_gcj02',
    'LOGGER',
]
