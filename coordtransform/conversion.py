"""
Module for converting coordinates between named coordinate systems
"""
__all__ = ['BD09', 'GCJ02', 'WGS84', 'convert_coordinate', 'get_converter', 'normalize_crs']

from typing import Callable, Tuple

from coordtransform.transform import (
    bd09_to_gcj02, bd09_to_wgs84, gcj02_to_bd09, gcj02_to_wgs84, out_of_china,
    wgs84_to_bd09, wgs84_to_gcj02
)
from coordtransform.utils.logging import warn_once

WGS84 = 'WGS84'
GCJ02 = 'GCJ02'
BD09 = 'BD09'

_ALIASES = {
    'wgs84': WGS84,
    'wgs-84': WGS84,
    'wgs': WGS84,
    'gps': WGS84,
    'epsg:4326': WGS84,
    'gcj02': GCJ02,
    'gcj-02': GCJ02,
    'gcj': GCJ02,
    'mars': GCJ02,
    'amap': GCJ02,
    'bd09': BD09,
    'bd-09': BD09,
    'bd': BD09,
    'baidu': BD09,
}

_CONVERTERS = {
    (WGS84, GCJ02): wgs84_to_gcj02,
    (WGS84, BD09): wgs84_to_bd09,
    (GCJ02, WGS84): gcj02_to_wgs84,
    (GCJ02, BD09): gcj02_to_bd09,
    (BD09, WGS84): bd09_to_wgs84,
    (BD09, GCJ02): bd09_to_gcj02,
}


def _identity(lng: float, lat: float) -> Tuple[float, float]:
    return lng, lat


def normalize_crs(crs: str) -> str:
    """
    Resolves a coordinate system name or alias (e.g. 'baidu', 'gcj-02') to its
    canonical name. Matching is case-insensitive.

    Args:
        crs: (str)
            The coordinate system name

    Returns:
        str, one of 'WGS84', 'GCJ02', 'BD09'
    """
    if not isinstance(crs, str):
        raise TypeError(
            f"Coordinate system must be given as a string, not {type(crs)}"
        )

    try:
        return _ALIASES[crs.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unrecognized coordinate system {crs!r}; "
            f"expected one of {', '.join((WGS84, GCJ02, BD09))}"
        ) from None


def get_converter(source: str, target: str) -> Callable[[float, float], Tuple[float, float]]:
    """
    Returns the function which converts a (longitude, latitude) pair from the
    source coordinate system to the target.

    Args:
        source: (str)
            The coordinate system of the input

        target: (str)
            The desired coordinate system

    Returns:
        A callable taking (longitude, latitude) and returning a (longitude, latitude) tuple
    """
    source, target = normalize_crs(source), normalize_crs(target)
    if source == target:
        return _identity

    return _CONVERTERS[(source, target)]


def convert_coordinate(lng: float, lat: float, source: str, target: str) -> Tuple[float, float]:
    """
    Converts a longitude/latitude pair between two coordinate systems.

    Args:
        lng: (float)
            The longitude

        lat: (float)
            The latitude

        source: (str)
            The coordinate system of lng/lat, e.g. 'WGS84' or 'baidu'

        target: (str)
            The coordinate system to convert to

    Returns:
        (longitude, latitude) in the target coordinate system
    """
    converter = get_converter(source, target)
    if converter is not _identity and WGS84 in (normalize_crs(source), normalize_crs(target)):
        if out_of_china(lng, lat):
            warn_once(
                'Coordinates outside of China are not offset between WGS84 and GCJ-02; '
                'the national offset was not applied. (this warning will not repeat)'
            )

    return converter(lng, lat)
