"""Author Lookup — GET /author/{bbid} and its aliases/identifiers/relationships views.

Invariants:
    - Existing Author → 200 with its bbid in the body
    - Malformed bbid → 406 on every lookup endpoint
    - Well-formed but unknown bbid → 404 on every lookup endpoint
    - A BBID of a non-Author entity is not found through /author
    - Repeated lookups are byte-identical
"""

import pytest

from tests.api.catalogue import (
    AUTHOR_REL_TYPE_ID, GROUP_BBID, MISSING_BBID, PERSON_BBID, WORK_BBID,
)

LOOKUP_SUFFIXES = ["", "/aliases", "/identifiers", "/relationships"]


async def test_get_author_returns_basic_info(client, seed_catalogue):
    res = await client.get(f"/author/{PERSON_BBID}")

    assert res.status_code == 200
    assert res.json() == {
        "bbid": PERSON_BBID,
        "beginArea": "United States",
        "beginDate": "1907-07-07",
        "defaultAlias": {
            "aliasLanguage": "eng",
            "name": "Robert A. Heinlein",
            "primary": True,
            "sortName": "Heinlein, Robert A.",
        },
        "disambiguation": "science fiction writer",
        "endArea": "United States",
        "endDate": "1988-05-08",
        "ended": True,
        "gender": "Male",
        "type": "Person",
    }


async def test_get_author_with_sparse_data_projects_nulls(client, seed_catalogue):
    res = await client.get(f"/author/{GROUP_BBID}")

    body = res.json()
    assert res.status_code == 200
    assert body["bbid"] == GROUP_BBID
    assert body["type"] == "Group"
    assert body["gender"] is None
    assert body["beginArea"] is None
    assert body["ended"] is False
    assert body["defaultAlias"]["aliasLanguage"] == "deu"


async def test_get_author_accepts_uppercase_bbid(client, seed_catalogue):
    res = await client.get(f"/author/{PERSON_BBID.upper()}")

    assert res.status_code == 200
    assert res.json()["bbid"] == PERSON_BBID


async def test_get_author_aliases(client, seed_catalogue):
    res = await client.get(f"/author/{PERSON_BBID}/aliases")

    assert res.status_code == 200
    assert res.json() == {
        "bbid": PERSON_BBID,
        "aliases": [
            {
                "language": "eng",
                "name": "Robert A. Heinlein",
                "primary": True,
                "sortName": "Heinlein, Robert A.",
            },
            {
                "language": "eng",
                "name": "Anson MacDonald",
                "primary": False,
                "sortName": "MacDonald, Anson",
            },
        ],
    }


async def test_get_author_identifiers(client, seed_catalogue):
    res = await client.get(f"/author/{PERSON_BBID}/identifiers")

    assert res.status_code == 200
    assert res.json() == {
        "bbid": PERSON_BBID,
        "identifiers": [
            {"type": "Wikidata ID", "value": "Q123078"},
            {"type": "ISNI", "value": "0000000121251077"},
        ],
    }


async def test_get_author_relationships(client, seed_catalogue):
    res = await client.get(f"/author/{PERSON_BBID}/relationships")

    assert res.status_code == 200
    body = res.json()
    assert body["bbid"] == PERSON_BBID
    assert [rel["id"] for rel in body["relationships"]] == [1, 3]
    assert body["relationships"][0] == {
        "direction": "forward",
        "id": 1,
        "linkPhrase": "wrote",
        "relationshipTypeId": AUTHOR_REL_TYPE_ID,
        "relationshipTypeName": "Author",
        "sourceBbid": PERSON_BBID,
        "sourceEntityType": "Author",
        "targetBbid": WORK_BBID,
        "targetEntityType": "Work",
    }


async def test_author_without_identifiers_returns_empty_list(
    client, seed_catalogue,
):
    res = await client.get(f"/author/{GROUP_BBID}/identifiers")

    assert res.status_code == 200
    assert res.json() == {"bbid": GROUP_BBID, "identifiers": []}


@pytest.mark.parametrize("suffix", LOOKUP_SUFFIXES)
@pytest.mark.parametrize("bad_bbid", ["not-a-uuid", "12345", "2e5f49a8-6a38-4cc7-97c7"])
async def test_malformed_bbid_returns_406(client, seed_catalogue, suffix, bad_bbid):
    res = await client.get(f"/author/{bad_bbid}{suffix}")

    assert res.status_code == 406
    assert res.json()["error"]["code"] == "INVALID_BBID"
    assert res.json()["error"]["message"] == "BBID is not valid uuid"


@pytest.mark.parametrize("suffix", LOOKUP_SUFFIXES)
async def test_unknown_bbid_returns_404(client, seed_catalogue, suffix):
    res = await client.get(f"/author/{MISSING_BBID}{suffix}")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "ENTITY_NOT_FOUND"
    assert res.json()["error"]["message"] == "Author not found"


async def test_work_bbid_is_not_an_author(client, seed_catalogue):
    res = await client.get(f"/author/{WORK_BBID}")

    assert res.status_code == 404


async def test_error_body_carries_no_entity_data(client, seed_catalogue):
    res = await client.get(f"/author/{MISSING_BBID}")

    assert set(res.json()) == {"error"}
    assert "bbid" not in res.json()["error"]


@pytest.mark.parametrize("suffix", LOOKUP_SUFFIXES)
async def test_repeated_lookups_are_byte_identical(client, seed_catalogue, suffix):
    first = await client.get(f"/author/{PERSON_BBID}{suffix}")
    second = await client.get(f"/author/{PERSON_BBID}{suffix}")

    assert first.status_code == 200
    assert first.content == second.content
