import pytest


async def source_by_author(client, author: str) -> dict:
    sources = (await client.get("/sources")).json()
    return next(s for s in sources if s["author"] == author)


@pytest.mark.asyncio
async def test_list_sources_with_citation_counts(client, atlas):
    response = await client.get("/sources")

    assert response.status_code == 200
    assert sorted(s["eventCount"] for s in response.json()) == [1, 1]


@pytest.mark.asyncio
async def test_search_sources_by_author(client, atlas):
    response = await client.get("/sources/search", params={"q": "JULIEN"})

    assert response.status_code == 200
    assert [s["author"] for s in response.json()] == ["Charles-André Julien"]


@pytest.mark.asyncio
async def test_search_requires_query(client):
    response = await client.get("/sources/search")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_source_lists_citing_events(client, atlas):
    source = await source_by_author(client, "أبو القاسم سعد الله")

    response = await client.get(f"/sources/{source['id']}")

    assert response.status_code == 200
    detail = response.json()
    assert detail["eventCount"] == 1
    assert detail["events"][0]["title"] == "مقاومة الغرب"
    assert detail["events"][0]["pageRange"] == "112-140"


@pytest.mark.asyncio
async def test_create_and_update_source(client, editor_headers, test_data):
    created = await client.post("/sources", json=test_data.get_copy("new_source"), headers=editor_headers)

    assert created.status_code == 201
    source = created.json()
    assert source["type"] == "ARCHIVE"
    assert source["url"].startswith("https://example.org/archives")

    updated = await client.put(
        f"/sources/{source['id']}", json={"year": 1902}, headers=editor_headers
    )
    assert updated.status_code == 200
    assert updated.json()["year"] == 1902
    assert updated.json()["title"] == source["title"]


@pytest.mark.asyncio
async def test_create_source_invalid_year(client, editor_headers, test_data):
    payload = test_data.get_copy("new_source")
    payload["year"] = 1200

    response = await client.post("/sources", json=payload, headers=editor_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_cited_source_cannot_be_deleted(client, admin_headers, atlas):
    source = await source_by_author(client, "Charles-André Julien")

    response = await client.delete(f"/sources/{source['id']}", headers=admin_headers)

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "SOURCE_IN_USE"
    assert error["details"] == {"eventCount": 1}


@pytest.mark.asyncio
async def test_delete_uncited_source(client, admin_headers, test_data):
    source = (
        await client.post("/sources", json=test_data.get_copy("new_source"), headers=admin_headers)
    ).json()

    response = await client.delete(f"/sources/{source['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert (await client.get(f"/sources/{source['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_source_admin_only(client, editor_headers, atlas):
    source = await source_by_author(client, "Charles-André Julien")

    response = await client.delete(f"/sources/{source['id']}", headers=editor_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["_", "%"])
async def test_search_sources_treats_like_wildcards_literally(client, atlas, text):
    response = await client.get("/sources/search", params={"q": text})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_search_sources_folds_accented_case(client, atlas):
    lower = await client.get("/sources/search", params={"q": "algérie"})
    upper = await client.get("/sources/search", params={"q": "ALGÉRIE"})

    assert [s["author"] for s in lower.json()] == ["Charles-André Julien"]
    assert upper.json() == lower.json()


@pytest.mark.asyncio
async def test_malformed_source_id_is_not_found(client, admin_headers, atlas):
    response = await client.delete("/sources/42", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SOURCE_NOT_FOUND"
