import pytest

from tests.utils.json_compare import exclude_keys

# Fields the review workflow is allowed to change
STATUS_FIELDS = {"reviewStatus", "updatedAt", "updatedById", "updatedBy"}


@pytest.fixture
def new_event(test_data, region_ids):
    payload = test_data.get_copy("new_event")
    payload["regionId"] = region_ids["31"]
    return payload


@pytest.mark.asyncio
async def test_create_event_starts_as_draft(client, editor_headers, new_event):
    """
    Given an editor sending reviewStatus CONFIRMED
    When the event is created
    Then it is stored as DRAFT and attributed to the editor
    """
    # Arrange
    new_event["reviewStatus"] = "CONFIRMED"

    # Act
    response = await client.post("/events", json=new_event, headers=editor_headers)

    # Assert
    assert response.status_code == 201
    event = response.json()
    assert event["reviewStatus"] == "DRAFT"
    assert event["createdBy"]["name"] == "Editor User"
    assert event["region"]["code"] == "31"
    assert event["coordinates"] == {"lat": 35.1, "lng": -1.6}
    assert event["parties"] == {"resistance": ["Emir's cavalry"], "colonial": ["8th battalion"]}

    stored = await client.get(f"/events/{event['id']}")
    assert stored.json()["reviewStatus"] == "DRAFT"


@pytest.mark.asyncio
async def test_create_event_with_links(client, editor_headers, new_event):
    people = (await client.get("/people")).json()
    sources = (await client.get("/sources")).json()
    tag = (await client.post("/tags", json={"name": "Resistance"}, headers=editor_headers)).json()
    new_event["personIds"] = [{"personId": people[0]["id"], "role": "قائد"}]
    new_event["sourceIds"] = [sources[0]["id"]]
    new_event["tagIds"] = [tag["id"]]

    response = await client.post("/events", json=new_event, headers=editor_headers)

    assert response.status_code == 201
    event = response.json()
    assert [p["personId"] for p in event["people"]] == [people[0]["id"]]
    assert [s["sourceId"] for s in event["sources"]] == [sources[0]["id"]]
    assert [t["name"] for t in event["tags"]] == ["Resistance"]


@pytest.mark.asyncio
async def test_create_event_requires_token(client, new_event):
    response = await client.post("/events", json=new_event)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


@pytest.mark.asyncio
async def test_create_event_forbidden_for_viewer(client, viewer_headers, new_event):
    response = await client.post("/events", json=new_event, headers=viewer_headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_create_event_admin_inherits_editor_rights(client, admin_headers, new_event):
    response = await client.post("/events", json=new_event, headers=admin_headers)

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_event_unknown_region_leaves_no_event(client, editor_headers, new_event):
    """
    Given a region id that does not exist
    When an event is created in it
    Then 404 is returned and no event is stored
    """
    new_event["regionId"] = "00000000-0000-0000-0000-000000000000"

    response = await client.post("/events", json=new_event, headers=editor_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "REGION_NOT_FOUND"
    listing = await client.get("/events", params={"search": new_event["title"]})
    assert listing.json()["total"] == 0


@pytest.mark.asyncio
async def test_create_event_unknown_person(client, editor_headers, new_event):
    new_event["personIds"] = [
        {"personId": "00000000-0000-0000-0000-000000000000", "role": "قائد"}
    ]

    response = await client.post("/events", json=new_event, headers=editor_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PERSON_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start,end,code",
    [
        ("1829-06-01", None, "DATE_OUT_OF_RANGE"),
        ("1845-09-23", "1845-01-01", "INVALID_DATE_RANGE"),
    ],
)
async def test_create_event_date_rules(client, editor_headers, new_event, start, end, code):
    new_event["startDate"] = start
    new_event["endDate"] = end

    response = await client.post("/events", json=new_event, headers=editor_headers)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == code


@pytest.mark.asyncio
async def test_create_event_short_description(client, editor_headers, new_event):
    new_event["description"] = "Too short"

    response = await client.post("/events", json=new_event, headers=editor_headers)

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "description"


@pytest.mark.asyncio
async def test_update_event_is_partial(client, editor_headers, event_ids):
    event_id = event_ids["Battle of Macta"]
    before = (await client.get(f"/events/{event_id}")).json()

    response = await client.put(
        f"/events/{event_id}",
        json={"outcome": "Trézel's column retreated to Arzew", "reviewStatus": "DRAFT"},
        headers=editor_headers,
    )

    assert response.status_code == 200
    after = response.json()
    assert after["outcome"] == "Trézel's column retreated to Arzew"
    assert after["title"] == before["title"]
    assert after["reviewStatus"] == "CONFIRMED"
    assert after["updatedBy"]["name"] == "Editor User"
    assert [s["sourceId"] for s in after["sources"]] == [s["sourceId"] for s in before["sources"]]


@pytest.mark.asyncio
async def test_update_event_replaces_links(client, editor_headers, event_ids):
    event_id = event_ids["مقاومة الغرب"]

    response = await client.put(
        f"/events/{event_id}", json={"personIds": [], "sourceIds": []}, headers=editor_headers
    )

    assert response.status_code == 200
    assert response.json()["people"] == []
    assert response.json()["sources"] == []


@pytest.mark.asyncio
async def test_update_event_end_before_stored_start(client, editor_headers, event_ids):
    response = await client.put(
        f"/events/{event_ids['Battle of Macta']}",
        json={"endDate": "1835-01-01"},
        headers=editor_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_DATE_RANGE"


@pytest.mark.asyncio
async def test_status_change_touches_nothing_else(client, admin_headers, event_ids):
    """
    Given a DRAFT event
    When an admin confirms it
    Then only the review fields differ from before
    """
    event_id = event_ids["Siege of Constantine"]
    before = (await client.get(f"/events/{event_id}")).json()

    response = await client.patch(
        f"/events/{event_id}/status", json={"status": "CONFIRMED"}, headers=admin_headers
    )

    assert response.status_code == 200
    after = (await client.get(f"/events/{event_id}")).json()
    assert before["reviewStatus"] == "DRAFT"
    assert after["reviewStatus"] == "CONFIRMED"
    assert after["updatedBy"]["name"] == "Admin User"
    assert exclude_keys(after, STATUS_FIELDS) == exclude_keys(before, STATUS_FIELDS)


@pytest.mark.asyncio
async def test_status_change_forbidden_for_editor(client, editor_headers, event_ids):
    response = await client.patch(
        f"/events/{event_ids['Siege of Constantine']}/status",
        json={"status": "CONFIRMED"},
        headers=editor_headers,
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_status_change_rejects_unknown_status(client, admin_headers, event_ids):
    response = await client.patch(
        f"/events/{event_ids['Siege of Constantine']}/status",
        json={"status": "PUBLISHED"},
        headers=admin_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_event_keeps_people_and_sources(client, admin_headers, event_ids):
    event_id = event_ids["مقاومة الغرب"]

    response = await client.delete(f"/events/{event_id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["id"] == event_id
    assert (await client.get(f"/events/{event_id}")).status_code == 404
    assert len((await client.get("/people")).json()) == 2
    assert len((await client.get("/sources")).json()) == 2


@pytest.mark.asyncio
async def test_delete_event_forbidden_for_editor(client, editor_headers, event_ids):
    response = await client.delete(
        f"/events/{event_ids['Battle of Macta']}", headers=editor_headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_delete_missing_event(client, admin_headers, atlas):
    response = await client.delete(
        "/events/00000000-0000-0000-0000-000000000000", headers=admin_headers
    )

    assert response.status_code == 404
