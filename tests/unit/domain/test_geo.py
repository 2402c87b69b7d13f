import pytest

from src.domain.geo import ring_centroid


def test_polygon_centroid_is_mean_of_first_ring():
    geometry = {
        "type": "Polygon",
        "coordinates": [
            [[3.0, 36.0], [4.0, 36.0], [4.0, 37.0], [3.0, 37.0]],
            [[3.4, 36.4], [3.6, 36.4], [3.6, 36.6]],
        ],
    }

    lat, lng = ring_centroid(geometry)

    assert lat == pytest.approx(36.5)
    assert lng == pytest.approx(3.5)


def test_multipolygon_uses_first_ring_of_first_polygon():
    geometry = {
        "type": "MultiPolygon",
        "coordinates": [
            [[[2.0, 32.0], [4.0, 32.0], [4.0, 34.0], [2.0, 34.0]]],
            [[[10.0, 10.0], [11.0, 10.0], [11.0, 11.0]]],
        ],
    }

    assert ring_centroid(geometry) == (pytest.approx(33.0), pytest.approx(3.0))


@pytest.mark.parametrize(
    "geometry",
    [
        None,
        {},
        {"type": "Point", "coordinates": [3.0, 36.0]},
        {"type": "Polygon", "coordinates": []},
        {"type": "MultiPolygon", "coordinates": [[]]},
    ],
)
def test_unsupported_or_empty_geometry_has_no_centroid(geometry):
    assert ring_centroid(geometry) is None
