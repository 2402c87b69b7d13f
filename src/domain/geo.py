from typing import Optional, Tuple


def ring_centroid(geometry: Optional[dict]) -> Optional[Tuple[float, float]]:
    """
    Mean of the vertices of the first outer ring, as (lat, lng).

    Supports GeoJSON Polygon and MultiPolygon; anything else yields None.
    GeoJSON positions are [lng, lat].
    """
    if not geometry:
        return None

    coordinates = geometry.get("coordinates") or []
    ring = None
    if geometry.get("type") == "Polygon" and coordinates:
        ring = coordinates[0]
    elif geometry.get("type") == "MultiPolygon" and coordinates and coordinates[0]:
        ring = coordinates[0][0]

    if not ring:
        return None

    lat = sum(point[1] for point in ring) / len(ring)
    lng = sum(point[0] for point in ring) / len(ring)
    return lat, lng
