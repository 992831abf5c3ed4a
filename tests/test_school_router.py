# tests/test_school_router.py
# HTTP contract of the /api school endpoints, for both data access strategies.

import pytest
from sqlalchemy.exc import OperationalError

from main import app
from services.school_details.api.school_router import get_school_repository
from services.school_details.repositories import OrmSchoolRepository

pytestmark = pytest.mark.anyio

ROSARY = {"school_name": "Rosary School", "school_address": "Dadar, Mumbai", "school_type": "Primary"}


async def _create(client, body=ROSARY):
    return await client.post("/api/add/schoolDetails", json=body)


async def _delete(client, body):
    return await client.request("DELETE", "/api/delete/schoolDetails", json=body)


async def test_health_check(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()["status"]


async def test_get_school_details_empty(client):
    resp = await client.get("/api/getSchoolDetails")
    assert resp.status_code == 200
    assert resp.json() == []


async def test_add_school_then_list(client):
    resp = await _create(client)
    assert resp.status_code == 201
    assert resp.json() == {"Status": "Success", "Message": "New school inserted successfully"}

    listed = (await client.get("/api/getSchoolDetails")).json()
    assert len(listed) == 1
    assert listed[0]["school_name"] == "Rosary School"
    assert listed[0]["school_address"] == "Dadar, Mumbai"
    assert listed[0]["school_type"] == "Primary"
    assert isinstance(listed[0]["school_id"], int)


@pytest.mark.parametrize(
    "body, message",
    [
        ({"school_address": "Dadar"}, "School name is required"),
        ({"school_name": "  ", "school_address": "Dadar"}, "School name is required"),
        ({"school_name": "Rosary School"}, "School address is required"),
        ({"school_name": "Rosary School", "school_address": ""}, "School address is required"),
    ],
)
async def test_add_school_validation(client, body, message):
    resp = await _create(client, body)
    assert resp.status_code == 400
    assert resp.json() == {"Status": "Failed", "Message": message}


async def test_add_duplicate_school_conflicts(client):
    assert (await _create(client)).status_code == 201

    resp = await _create(client)
    assert resp.status_code == 409
    assert resp.json() == {"Status": "Failed", "Message": "School already exists"}
    assert len((await client.get("/api/getSchoolDetails")).json()) == 1


@pytest.mark.parametrize("operation_type", [None, "", "remove", "DELETE-ALL"])
async def test_delete_requires_delete_operation_type(client, operation_type):
    await _create(client)
    resp = await _delete(client, {"operation_type": operation_type, "school_id": 1, "school_name": "Rosary School"})
    assert resp.status_code == 400
    assert resp.json() == {"Status": "Failed", "Message": "'operation_type' must be DELETE"}
    assert len((await client.get("/api/getSchoolDetails")).json()) == 1


@pytest.mark.parametrize("operation_type", ["delete", "DELETE", "Delete"])
async def test_delete_school(client, operation_type):
    await _create(client)
    school_id = (await client.get("/api/getSchoolDetails")).json()[0]["school_id"]

    resp = await _delete(client, {"operation_type": operation_type, "school_id": school_id})
    assert resp.status_code == 200
    assert resp.json() == {"Status": "Success", "Message": "Record deleted successfully"}
    assert (await client.get("/api/getSchoolDetails")).json() == []


async def test_delete_twice_is_not_found(client):
    await _create(client)
    body = {"operation_type": "delete", "school_id": 1, "school_name": "Rosary School"}

    assert (await _delete(client, body)).status_code == 200

    resp = await _delete(client, body)
    assert resp.status_code == 404
    assert resp.json() == {"Status": "Failed", "Message": "Record not found"}


async def test_delete_without_id_or_name_is_not_found(client):
    resp = await _delete(client, {"operation_type": "delete"})
    assert resp.status_code == 404


async def test_update_address(client):
    await _create(client)
    school_id = (await client.get("/api/getSchoolDetails")).json()[0]["school_id"]

    resp = await client.put("/api/updateSchoolAddress", json={"school_id": school_id, "school_address": "Andheri"})
    assert resp.status_code == 200
    assert resp.json() == {"Status": "Success", "Message": "School address updated successfully"}
    assert (await client.get("/api/getSchoolDetails")).json()[0]["school_address"] == "Andheri"


async def test_update_blank_address(client):
    await _create(client)
    resp = await client.put("/api/updateSchoolAddress", json={"school_id": 1, "school_address": " "})
    assert resp.status_code == 400
    assert resp.json() == {"Status": "Failed", "Message": "School address is required"}


async def test_update_unknown_school(client):
    resp = await client.put("/api/updateSchoolAddress", json={"school_id": 42, "school_address": "Andheri"})
    assert resp.status_code == 404
    assert resp.json() == {"Status": "Failed", "Message": "No school found with id=42"}


async def test_malformed_body_is_bad_request(client):
    resp = await client.put("/api/updateSchoolAddress", json={"school_id": "abc", "school_address": "Andheri"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["Status"] == "Failed"
    assert "school_id" in body["Message"]


async def test_write_database_failure_is_server_error(client, session_factory):
    class BrokenRepository(OrmSchoolRepository):
        async def insert(self, school_name, school_address, school_type):
            raise OperationalError("INSERT INTO schools", {}, Exception("database is locked"))

    async def _broken_repository():
        async with session_factory() as session:
            yield BrokenRepository(session)

    app.dependency_overrides[get_school_repository] = _broken_repository
    resp = await _create(client)
    assert resp.status_code == 500
    assert resp.json() == {"Status": "Error", "Message": "Unknown error occurred"}


async def test_read_database_failure_is_server_error(client, session_factory):
    class BrokenRepository(OrmSchoolRepository):
        async def list_all(self):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    async def _broken_repository():
        async with session_factory() as session:
            yield BrokenRepository(session)

    app.dependency_overrides[get_school_repository] = _broken_repository
    resp = await client.get("/api/getSchoolDetails")
    assert resp.status_code == 500
    assert resp.json()["Status"] == "Error"


@pytest.mark.parametrize("school_id", [True, False])
async def test_delete_rejects_boolean_school_id(client, school_id):
    await _create(client)
    resp = await _delete(client, {"operation_type": "delete", "school_id": school_id})
    assert resp.status_code == 400
    assert resp.json()["Status"] == "Failed"
    assert "school_id" in resp.json()["Message"]
    assert len((await client.get("/api/getSchoolDetails")).json()) == 1


@pytest.mark.parametrize("school_id", [True, False])
async def test_update_rejects_boolean_school_id(client, school_id):
    await _create(client)
    resp = await client.put("/api/updateSchoolAddress", json={"school_id": school_id, "school_address": "Andheri"})
    assert resp.status_code == 400
    assert resp.json()["Status"] == "Failed"
    assert (await client.get("/api/getSchoolDetails")).json()[0]["school_address"] == "Dadar, Mumbai"


@pytest.mark.parametrize("school_id", [2**31, 2**63, -(2**31) - 1])
async def test_out_of_range_school_id_is_bad_request(client, school_id):
    resp = await client.put("/api/updateSchoolAddress", json={"school_id": school_id, "school_address": "Andheri"})
    assert resp.status_code == 400
    assert resp.json()["Status"] == "Failed"

    resp = await _delete(client, {"operation_type": "delete", "school_id": school_id})
    assert resp.status_code == 400
    assert resp.json()["Status"] == "Failed"


async def test_numeric_string_school_id_is_accepted(client):
    await _create(client)
    resp = await client.put("/api/updateSchoolAddress", json={"school_id": "1", "school_address": "Andheri"})
    assert resp.status_code == 200
