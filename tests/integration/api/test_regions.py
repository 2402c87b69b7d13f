import pytest


@pytest.mark.asyncio
async def test_list_regions_with_event_counts(client, atlas):
    response = await client.get("/regions")

    assert response.status_code == 200
    regions = response.json()
    assert [r["code"] for r in regions] == ["16", "17", "31"]
    assert {r["code"]: r["eventCount"] for r in regions} == {"16": 2, "17": 2, "31": 2}


@pytest.mark.asyncio
async def test_seeded_centroid(client, atlas):
    region = (await client.get("/regions/code/16")).json()

    assert region["centerLat"] == pytest.approx(36.5)
    assert region["centerLng"] == pytest.approx(3.5)


@pytest.mark.asyncio
async def test_lookup_by_code_and_by_id_agree(client, region_ids):
    """
    Given region 31
    When it is fetched by code and by id
    Then both return the same region, and neither key works in the other's slot
    """
    by_code = await client.get("/regions/code/31")
    by_id = await client.get(f"/regions/{region_ids['31']}")
    id_as_code = await client.get(f"/regions/code/{region_ids['31']}")
    code_as_id = await client.get("/regions/31")

    assert by_code.status_code == 200
    assert by_id.status_code == 200
    assert by_code.json()["id"] == by_id.json()["id"] == region_ids["31"]
    assert sorted(e["title"] for e in by_code.json()["events"]) == sorted(
        ["مقاومة الغرب", "Battle of Macta"]
    )
    assert id_as_code.status_code == 404
    assert id_as_code.json()["error"]["code"] == "REGION_NOT_FOUND"
    assert code_as_id.status_code == 422


@pytest.mark.asyncio
async def test_geojson_lists_only_regions_with_geometry(client, atlas):
    response = await client.get("/regions/geojson")

    assert response.status_code == 200
    collection = response.json()
    assert collection["type"] == "FeatureCollection"
    assert len(collection["features"]) == 1
    feature = collection["features"][0]
    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "Polygon"
    assert feature["properties"]["code"] == "16"
    assert feature["properties"]["name_ar"] == "الجزائر"
    assert feature["properties"]["event_count"] == 2


@pytest.mark.asyncio
async def test_create_region_derives_center(client, admin_headers, test_data):
    response = await client.post("/regions", json=test_data.get_copy("new_region"), headers=admin_headers)

    assert response.status_code == 201
    region = response.json()
    assert region["code"] == "47"
    assert region["eventCount"] == 0
    assert region["centerLat"] == pytest.approx(33.0)
    assert region["centerLng"] == pytest.approx(3.0)


@pytest.mark.asyncio
async def test_create_region_duplicate_code(client, admin_headers, atlas):
    response = await client.post(
        "/regions", json={"code": "16", "nameAr": "الجزائر العاصمة"}, headers=admin_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "REGION_CODE_EXISTS"


@pytest.mark.asyncio
async def test_create_region_rejects_point_geometry(client, admin_headers):
    response = await client.post(
        "/regions",
        json={"code": "48", "nameAr": "غليزان", "geometry": {"type": "Point", "coordinates": [0, 35]}},
        headers=admin_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_region_admin_only(client, editor_headers, test_data):
    response = await client.post("/regions", json=test_data.get_copy("new_region"), headers=editor_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_region(client, admin_headers, region_ids):
    response = await client.put(
        f"/regions/{region_ids['17']}", json={"nameEn": "Djelfa Province"}, headers=admin_headers
    )

    assert response.status_code == 200
    region = response.json()
    assert region["nameEn"] == "Djelfa Province"
    assert region["nameAr"] == "الجلفة"
    assert region["code"] == "17"
    assert region["eventCount"] == 2


@pytest.mark.asyncio
async def test_update_region_clears_geometry(client, admin_headers, region_ids):
    response = await client.put(
        f"/regions/{region_ids['16']}", json={"geometry": None}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["centerLat"] is None
    geojson = (await client.get("/regions/geojson")).json()
    assert geojson["features"] == []
