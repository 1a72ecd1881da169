"""Tuition endpoint against an in-memory MongoDB (mongomock-motor)."""

from bson import ObjectId
from httpx import AsyncClient


async def test_list_tuitions_empty(client: AsyncClient) -> None:
    """GET /api/tuitions with no postings returns an empty successful list."""
    response = await client.get("/api/tuitions")
    assert response.status_code == 200
    assert response.json() == {"success": True, "count": 0, "data": []}


async def test_list_tuitions_returns_all_documents(
    client: AsyncClient, insert_tuitions
) -> None:
    """Every posting is returned with all fields and ids as strings."""
    student_id = ObjectId()
    open_post = {
        "_id": ObjectId(),
        "studentId": student_id,
        "status": "open",
        "subject": "Physics",
        "salary": 6000,
    }
    closed_post = {"_id": ObjectId(), "studentId": student_id, "status": "closed"}
    await insert_tuitions(open_post, closed_post)

    response = await client.get("/api/tuitions")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 2
    by_id = {t["_id"]: t for t in body["data"]}
    assert by_id[str(open_post["_id"])] == {
        "_id": str(open_post["_id"]),
        "studentId": str(student_id),
        "status": "open",
        "subject": "Physics",
        "salary": 6000,
    }
    assert by_id[str(closed_post["_id"])]["status"] == "closed"


async def test_sparse_and_nested_tuitions_round_trip(
    client: AsyncClient, insert_tuitions
) -> None:
    """Postings come back with exactly their stored fields, nested values included."""
    sparse = {"_id": ObjectId(), "title": "Chemistry"}
    nested = {
        "_id": ObjectId(),
        "status": 3,
        "schedule": {"days": ["Sat", "Mon"], "time": {"from": "17:00", "to": "19:00"}},
        "applicants": [ObjectId()],
    }
    await insert_tuitions(sparse, nested)

    response = await client.get("/api/tuitions")

    assert response.status_code == 200
    by_id = {t["_id"]: t for t in response.json()["data"]}
    assert by_id[str(sparse["_id"])] == {"_id": str(sparse["_id"]), "title": "Chemistry"}
    assert by_id[str(nested["_id"])] == {
        "_id": str(nested["_id"]),
        "status": 3,
        "schedule": {"days": ["Sat", "Mon"], "time": {"from": "17:00", "to": "19:00"}},
        "applicants": [str(nested["applicants"][0])],
    }
