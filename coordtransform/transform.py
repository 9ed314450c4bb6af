"""
Conversions between the WGS84, GCJ-02 and BD-09 coordinate systems

All functions take a longitude/latitude pair in decimal degrees and return a new
(longitude, latitude) tuple. Nothing here validates its input: NaN, infinite or
out-of-range values flow through the arithmetic and come out as (meaningless) floats.
"""

__all__ = [
    'bd09_to_gcj02', 'bd09_to_wgs84', 'gcj02_to_bd09', 'gcj02_to_wgs84',
    'out_of_china', 'wgs84_to_bd09', 'wgs84_to_gcj02',
]

import math
from typing import Tuple

from coordtransform._const import (
    BD09_LAT_SHIFT, BD09_LON_SHIFT, CHINA_MAX_LAT, CHINA_MAX_LON, CHINA_MIN_LAT,
    CHINA_MIN_LON, GCJ02_ORIGIN_LAT, GCJ02_ORIGIN_LON, KRASOVSKY_A, KRASOVSKY_EE, PI, X_PI
)


def bd09_to_wgs84(lng: float, lat: float) -> Tuple[float, float]:
    """
    Convert a BD-09 (Baidu) coordinate to WGS84, by way of GCJ-02.

    Args:
        lng:
            BD-09 longitude

        lat:
            BD-09 latitude

    Returns:
        (longitude, latitude) in WGS84
    """
    gcj_lng, gcj_lat = bd09_to_gcj02(lng, lat)
    return gcj02_to_wgs84(gcj_lng, gcj_lat)


def wgs84_to_bd09(lng: float, lat: float) -> Tuple[float, float]:
    """
    Convert a WGS84 coordinate to BD-09 (Baidu), by way of GCJ-02.

    Args:
        lng:
            WGS84 longitude

        lat:
            WGS84 latitude

    Returns:
        (longitude, latitude) in BD-09
    """
    gcj_lng, gcj_lat = wgs84_to_gcj02(lng, lat)
    return gcj02_to_bd09(gcj_lng, gcj_lat)


def gcj02_to_bd09(lng: float, lat: float) -> Tuple[float, float]:
    """
    Convert a GCJ-02 (Amap, Tencent, Google China) coordinate to BD-09 (Baidu).

    The point is treated as polar coordinates around (0, 0); radius and angle are each
    nudged by a small periodic term before a fixed shift is added.

    Args:
        lng:
            GCJ-02 longitude

        lat:
            GCJ-02 latitude

    Returns:
        (longitude, latitude) in BD-09
    """
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * _sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * _cos(lng * X_PI)
    bd_lng = z * _cos(theta) + BD09_LON_SHIFT
    bd_lat = z * _sin(theta) + BD09_LAT_SHIFT
    return bd_lng, bd_lat


def bd09_to_gcj02(lng: float, lat: float) -> Tuple[float, float]:
    """
    Convert a BD-09 (Baidu) coordinate to GCJ-02.

    This is not the exact inverse of gcj02_to_bd09: the periodic terms are evaluated at
    the shifted BD-09 point rather than solved for, which leaves an error below 1e-6
    degrees for points in China.

    Args:
        lng:
            BD-09 longitude

        lat:
            BD-09 latitude

    Returns:
        (longitude, latitude) in GCJ-02
    """
    x = lng - BD09_LON_SHIFT
    y = lat - BD09_LAT_SHIFT
    z = math.sqrt(x * x + y * y) - 0.00002 * _sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * _cos(x * X_PI)
    gcj_lng = z * _cos(theta)
    gcj_lat = z * _sin(theta)
    return gcj_lng, gcj_lat


def wgs84_to_gcj02(lng: float, lat: float) -> Tuple[float, float]:
    """
    Convert a WGS84 (GPS) coordinate to GCJ-02. Points outside of China are
    returned unchanged.

    Args:
        lng:
            WGS84 longitude

        lat:
            WGS84 latitude

    Returns:
        (longitude, latitude) in GCJ-02
    """
    if out_of_china(lng, lat):
        return lng, lat

    d_lng, d_lat = _offset(lng, lat)
    return lng + d_lng, lat + d_lat


def gcj02_to_wgs84(lng: float, lat: float) -> Tuple[float, float]:
    """
    Convert a GCJ-02 coordinate to WGS84. Points outside of China are returned
    unchanged.

    The offset is computed at the GCJ-02 point itself (as though it were WGS84) and the
    shifted point is reflected back across the input, so the result is only accurate to
    roughly 1e-5 degrees.

    Args:
        lng:
            GCJ-02 longitude

        lat:
            GCJ-02 latitude

    Returns:
        (longitude, latitude) in WGS84
    """
    if out_of_china(lng, lat):
        return lng, lat

    d_lng, d_lat = _offset(lng, lat)
    return lng * 2 - (lng + d_lng), lat * 2 - (lat + d_lat)


def out_of_china(lng: float, lat: float) -> bool:
    """
    Test whether a point falls outside the (coarse) bounding box of China, in which
    case no GCJ-02 offset applies.

    Args:
        lng:
            The longitude

        lat:
            The latitude

    Returns:
        bool
    """
    if lng < CHINA_MIN_LON or lng > CHINA_MAX_LON:
        return True

    return lat < CHINA_MIN_LAT or lat > CHINA_MAX_LAT


def _offset(lng: float, lat: float) -> Tuple[float, float]:
    """The GCJ-02 (d_lng, d_lat) in degrees at a given point"""
    d_lat = _transform_lat(lng - GCJ02_ORIGIN_LON, lat - GCJ02_ORIGIN_LAT)
    d_lng = _transform_lng(lng - GCJ02_ORIGIN_LON, lat - GCJ02_ORIGIN_LAT)
    rad_lat = lat / 180.0 * PI
    magic = math.sin(rad_lat)
    magic = 1 - KRASOVSKY_EE * magic * magic
    sqrt_magic = math.sqrt(magic)
    d_lat = (d_lat * 180.0) / ((KRASOVSKY_A * (1 - KRASOVSKY_EE)) / (magic * sqrt_magic) * PI)
    d_lng = (d_lng * 180.0) / (KRASOVSKY_A / sqrt_magic * math.cos(rad_lat) * PI)
    return d_lng, d_lat


def _transform_lat(lng: float, lat: float) -> float:
    """Latitude offset series, in meters, relative to the series origin"""
    ret = (
        -100.0 + 2.0 * lng + 3.0 * lat + 0.2 * lat * lat + 0.1 * lng * lat
        + 0.2 * math.sqrt(abs(lng))
    )
    ret += (20.0 * math.sin(6.0 * lng * PI) + 20.0 * math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lat * PI) + 40.0 * math.sin(lat / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(lat / 12.0 * PI) + 320 * math.sin(lat * PI / 30.0)) * 2.0 / 3.0
    return ret


def _transform_lng(lng: float, lat: float) -> float:
    """Longitude offset series, in meters, relative to the series origin"""
    ret = (
        300.0 + lng + 2.0 * lat + 0.1 * lng * lng + 0.1 * lng * lat
        + 0.1 * math.sqrt(abs(lng))
    )
    ret += (20.0 * math.sin(6.0 * lng * PI) + 20.0 * math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lng * PI) + 40.0 * math.sin(lng / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(lng / 12.0 * PI) + 300.0 * math.sin(lng / 30.0 * PI)) * 2.0 / 3.0
    return ret


def _sin(value: float) -> float:
    # math.sin raises on +/-inf instead of returning nan
    return math.sin(value) if math.isfinite(value) else math.nan


def _cos(value: float) -> float:
    return math.cos(value) if math.isfinite(value) else math.nan
