import pytest


async def list_titles(client, **params) -> list:
    response = await client.get("/events", params={"limit": 100, **params})
    assert response.status_code == 200
    return [event["title"] for event in response.json()["data"]]


@pytest.mark.asyncio
async def test_list_all_seeded_events(client, atlas):
    response = await client.get("/events")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 6
    assert data["page"] == 1
    assert data["limit"] == 20
    assert data["totalPages"] == 1
    # Default order is oldest first
    assert [e["startDate"] for e in data["data"]] == sorted(e["startDate"] for e in data["data"])


@pytest.mark.asyncio
async def test_list_expands_region_people_and_sources(client, atlas):
    response = await client.get("/events", params={"search": "مقاومة الغرب"})

    event = response.json()["data"][0]
    assert event["region"]["code"] == "31"
    assert event["region"]["nameAr"] == "وهران"
    assert event["people"][0]["role"] == "قائد"
    assert event["people"][0]["person"]["nameAr"] == "الأمير عبد القادر"
    assert event["sources"][0]["pageRange"] == "112-140"
    assert event["sources"][0]["source"]["type"] == "BOOK"


@pytest.mark.asyncio
async def test_search_matches_region_name(client, atlas):
    """
    Given events whose text never mentions their region
    When searching for the region's Arabic name
    Then every event of that region is found
    """
    titles = await list_titles(client, search="وهران")

    assert sorted(titles) == sorted(["مقاومة الغرب", "Battle of Macta"])


@pytest.mark.asyncio
async def test_search_matches_linked_person_name(client, atlas):
    assert await list_titles(client, search="عبد القادر") == ["مقاومة الغرب"]


@pytest.mark.asyncio
async def test_search_is_case_insensitive(client, atlas):
    assert await list_titles(client, search="MACTA") == ["Battle of Macta"]


@pytest.mark.asyncio
async def test_search_matches_outcome(client, atlas):
    assert await list_titles(client, search="guerrilla") == ["Revolt of the south-west"]


@pytest.mark.asyncio
async def test_year_bounds_are_inclusive(client, atlas):
    """
    Given events on 1839-12-31 and 1840-01-01
    When filtering by start and end year
    Then each boundary day falls on the expected side
    """
    from_1840 = await list_titles(client, startYear=1840)
    until_1839 = await list_titles(client, endYear=1839)

    assert "Winter raid" not in from_1840
    assert sorted(from_1840) == sorted(["New year uprising", "Revolt of the south-west"])
    assert "Winter raid" in until_1839
    assert len(until_1839) == 4
    assert await list_titles(client, startYear=1839, endYear=1839) == ["Winter raid"]


@pytest.mark.asyncio
async def test_year_out_of_range(client, atlas):
    response = await client.get("/events", params={"startYear": 1700})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_pagination_total_is_stable(client, atlas):
    """
    Given six events
    When paging four at a time
    Then total is the same on every page and pages never overlap
    """
    pages = []
    for page in (1, 2, 3):
        response = await client.get(
            "/events", params={"limit": 4, "page": page, "sortBy": "title"}
        )
        assert response.status_code == 200
        pages.append(response.json())

    assert [p["total"] for p in pages] == [6, 6, 6]
    assert [p["totalPages"] for p in pages] == [2, 2, 2]
    assert [len(p["data"]) for p in pages] == [4, 2, 0]

    ids = [e["id"] for p in pages for e in p["data"]]
    assert len(set(ids)) == 6


@pytest.mark.asyncio
async def test_region_filter_uses_code(client, atlas, region_ids):
    """
    Given a region with code 31
    When filtering by regionId
    Then the code matches and the opaque id does not
    """
    by_code = await list_titles(client, regionId="31")
    by_id = await list_titles(client, regionId=region_ids["31"])

    assert sorted(by_code) == sorted(["مقاومة الغرب", "Battle of Macta"])
    assert by_id == []


@pytest.mark.asyncio
async def test_filters_combine(client, atlas):
    titles = await list_titles(client, regionId="16", reviewStatus="UNVERIFIED")

    assert titles == ["Winter raid"]


@pytest.mark.asyncio
async def test_multiple_types(client, atlas):
    response = await client.get("/events", params=[("type", "BATTLE"), ("type", "SIEGE")])

    titles = [e["title"] for e in response.json()["data"]]
    assert sorted(titles) == ["Battle of Macta", "Siege of Constantine"]


@pytest.mark.asyncio
async def test_sort_by_title_descending(client, atlas):
    titles = await list_titles(client, sortBy="title", sortOrder="desc")

    assert titles == sorted(titles, reverse=True)


@pytest.mark.asyncio
async def test_unknown_sort_field(client, atlas):
    response = await client.get("/events", params={"sortBy": "passwordHash"})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "INVALID_SORT_FIELD"
    assert "startDate" in error["details"]["allowed"]


@pytest.mark.asyncio
async def test_statistics(client, atlas):
    response = await client.get("/events/statistics")

    assert response.status_code == 200
    stats = response.json()
    assert stats["total"] == 6
    assert stats["regionsWithEvents"] == 3
    by_status = {row["status"]: row["count"] for row in stats["byStatus"]}
    assert by_status == {"CONFIRMED": 2, "DRAFT": 1, "UNVERIFIED": 2, "NEEDS_REVIEW": 1}
    assert sum(row["count"] for row in stats["byType"]) == 6


@pytest.mark.asyncio
async def test_region_events_by_code(client, atlas):
    response = await client.get("/events/region/17")

    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == [
        "New year uprising",
        "Revolt of the south-west",
    ]


@pytest.mark.asyncio
async def test_region_events_unknown_code_is_empty(client, atlas):
    response = await client.get("/events/region/99")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_event(client, event_ids):
    response = await client.get(f"/events/{event_ids['مقاومة الغرب']}")

    assert response.status_code == 200
    event = response.json()
    assert event["title"] == "مقاومة الغرب"
    assert event["tags"] == []
    assert event["reviewStatus"] == "CONFIRMED"


@pytest.mark.asyncio
async def test_get_missing_event(client, atlas):
    response = await client.get("/events/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["_", "%", "\\"])
async def test_search_treats_like_wildcards_literally(client, atlas, text):
    response = await client.get("/events", params={"search": text})

    assert response.status_code == 200
    assert response.json()["total"] == 0
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_search_finds_text_containing_a_wildcard_character(
    client, editor_headers, test_data, region_ids
):
    payload = test_data.get_copy("new_event")
    payload["regionId"] = region_ids["31"]
    payload["title"] = "Sidi Brahim 100% encircled"
    created = await client.post("/events", json=payload, headers=editor_headers)
    assert created.status_code == 201

    assert await list_titles(client, search="100%") == ["Sidi Brahim 100% encircled"]
    assert await list_titles(client, search="0%") == ["Sidi Brahim 100% encircled"]


@pytest.mark.asyncio
async def test_malformed_event_id_is_not_found(client, atlas):
    response = await client.get("/events/not-an-id")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"
