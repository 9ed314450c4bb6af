import pytest

from coordtransform import BD09, GCJ02, WGS84, Coordinate
from coordtransform.transform import bd09_to_wgs84, gcj02_to_bd09, wgs84_to_gcj02


def test_coordinate_init():
    c = Coordinate(0., 1.)
    assert c.longitude == 0.
    assert c.latitude == 1.
    assert c.crs == WGS84

    c = Coordinate('0.0', '1.0', 'baidu')
    assert c.longitude == 0.
    assert c.latitude == 1.
    assert c.crs == BD09

    # No bounding is applied
    assert Coordinate(360, 180).to_float() == (360., 180.)

    with pytest.raises(ValueError):
        Coordinate('foo', 1.)

    with pytest.raises(ValueError):
        Coordinate(0., 1., 'EPSG:3857')


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(0., 0., GCJ02),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 3
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(0., 0., 'mars') in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) == Coordinate(0., 0., 'gps')
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != Coordinate(0., 0., BD09)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(0., 1.)) == '<Coordinate(0.0, 1.0, WGS84)>'
    assert repr(Coordinate(0., 1., 'bd-09')) == '<Coordinate(0.0, 1.0, BD09)>'


def test_coordinate_in_china():
    assert Coordinate(116.404, 39.915).in_china
    assert not Coordinate(-122.4194, 37.7749).in_china


def test_coordinate_to_crs():
    c = Coordinate(116.404, 39.915)
    assert c.to_crs('wgs84') is c

    gcj = c.to_crs('gcj02')
    assert gcj.crs == GCJ02
    assert gcj.to_float() == wgs84_to_gcj02(116.404, 39.915)

    assert c.to_gcj02() == gcj
    assert c.to_gcj02().to_bd09() == Coordinate(
        *gcj02_to_bd09(*wgs84_to_gcj02(116.404, 39.915)), BD09
    )

    bd = Coordinate(116.404, 39.915, BD09)
    assert bd.to_wgs84() == Coordinate(*bd09_to_wgs84(116.404, 39.915))
    assert bd.to_wgs84().to_float() == pytest.approx(
        (116.3913836995125, 39.907253214522164), abs=1e-9
    )


def test_coordinate_to_crs_outside_china():
    c = Coordinate(-122.4194, 37.7749)
    assert c.to_gcj02() == Coordinate(-122.4194, 37.7749, GCJ02)
    assert c.to_gcj02().to_wgs84() == c


def test_coordinate_to_float():
    assert Coordinate(0., 1.).to_float() == (0.0, 1.0)
    assert Coordinate(0., 1.).to_float(reverse=True) == (1.0, 0.0)


def test_coordinate_to_str():
    assert Coordinate(0., 1.).to_str() == ('0.0', '1.0')
    assert Coordinate(0., 1.).to_str(reverse=True) == ('1.0', '0.0')
