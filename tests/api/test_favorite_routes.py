"""API tests for the favorites endpoints, backed by the in-memory repository."""

import pytest


@pytest.mark.asyncio
async def test_empty_store_lists_no_favorites(api_client):
    response = await api_client.get("/favorites")

    assert response.status_code == 200
    assert response.json() == {"favorites": []}


@pytest.mark.asyncio
async def test_create_then_list_contains_record_once(api_client):
    payload = {"name": "Luke Skywalker", "type": "character", "url": "https://swapi.dev/api/people/1/"}

    created = await api_client.post("/favorites", json=payload)

    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "Favorite saved!"
    assert body["favorite"]["name"] == "Luke Skywalker"
    assert body["favorite"]["type"] == "character"
    assert body["favorite"]["url"] == "https://swapi.dev/api/people/1/"
    assert body["favorite"]["id"]

    listed = (await api_client.get("/favorites")).json()["favorites"]
    assert [fav for fav in listed if fav["name"] == "Luke Skywalker"] == [body["favorite"]]


@pytest.mark.asyncio
async def test_invalid_type_is_rejected_and_not_persisted(api_client, repository):
    response = await api_client.post(
        "/favorites",
        json={"name": "Millennium Falcon", "type": "vehicle", "url": "https://swapi.dev/api/starships/10/"},
    )

    assert response.status_code == 500
    assert response.json() == {"message": '"type" should be "movie" or "character"!'}
    assert repository.records == []


@pytest.mark.asyncio
async def test_missing_type_is_rejected(api_client, repository):
    response = await api_client.post("/favorites", json={"name": "Yoda"})

    assert response.status_code == 500
    assert response.json() == {"message": '"type" should be "movie" or "character"!'}
    assert repository.records == []


@pytest.mark.asyncio
async def test_duplicate_name_is_rejected(api_client, repository):
    first = await api_client.post("/favorites", json={"name": "Leia Organa", "type": "character", "url": "a"})
    second = await api_client.post("/favorites", json={"name": "Leia Organa", "type": "movie", "url": "b"})

    assert first.status_code == 201
    assert second.status_code == 500
    assert second.json() == {"message": "Favorite exists already!"}
    assert [fav.name for fav in repository.records] == ["Leia Organa"]


@pytest.mark.asyncio
async def test_storage_failure_hides_details(api_client, repository):
    repository.fail_writes = True

    response = await api_client.post("/favorites", json={"name": "Boba Fett", "type": "character", "url": None})

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong."}


@pytest.mark.asyncio
async def test_list_storage_failure(api_client, repository):
    repository.fail_reads = True

    response = await api_client.get("/favorites")

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong."}


@pytest.mark.asyncio
async def test_listing_is_idempotent(api_client):
    await api_client.post("/favorites", json={"name": "A New Hope", "type": "movie", "url": "u1"})
    await api_client.post("/favorites", json={"name": "Obi-Wan Kenobi", "type": "character", "url": "u2"})

    first = await api_client.get("/favorites")
    second = await api_client.get("/favorites")

    assert first.json() == second.json()
    assert [fav["name"] for fav in first.json()["favorites"]] == ["A New Hope", "Obi-Wan Kenobi"]


@pytest.mark.asyncio
async def test_non_string_fields_fail_request_validation(api_client, repository):
    response = await api_client.post("/favorites", json={"name": ["Yoda"], "type": "character"})

    assert response.status_code == 422
    assert repository.records == []


@pytest.mark.asyncio
async def test_missing_body_gets_domain_message(api_client, repository):
    response = await api_client.post("/favorites")

    assert response.status_code == 500
    assert response.json() == {"message": '"type" should be "movie" or "character"!'}
    assert repository.records == []
