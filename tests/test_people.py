"""사람 API 테스트.

Person API tests — CRUD within a space and assignment cleanup on delete.
"""

import uuid

from httpx import AsyncClient


class TestPeople:
    """사람 CRUD 테스트."""

    async def test_create_person(self, client: AsyncClient, space):
        role = (await client.post(f"/api/spaces/{space.id}/roles", json={"name": "Reporter"})).json()
        res = await client.post(f"/api/spaces/{space.id}/people", json={
            "name": "Clark Kent",
            "space_role_id": role["id"],
            "new_person": True,
        })
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Clark Kent"
        assert data["space_role_id"] == role["id"]
        assert data["new_person"] is True
        assert data["space_id"] == str(space.id)

    async def test_create_person_empty_name(self, client: AsyncClient, space):
        res = await client.post(f"/api/spaces/{space.id}/people", json={"name": ""})
        assert res.status_code == 422

    async def test_create_person_unknown_role(self, client: AsyncClient, space):
        res = await client.post(f"/api/spaces/{space.id}/people", json={
            "name": "Clark Kent",
            "space_role_id": str(uuid.uuid4()),
        })
        assert res.status_code == 404

    async def test_create_person_unknown_space(self, client: AsyncClient):
        res = await client.post(f"/api/spaces/{uuid.uuid4()}/people", json={"name": "Nobody"})
        assert res.status_code == 404

    async def test_list_people_in_creation_order(self, client: AsyncClient, space, person, person_two):
        res = await client.get(f"/api/spaces/{space.id}/people")
        assert res.status_code == 200
        assert [p["name"] for p in res.json()] == ["Bruce Wayne", "Diana Prince"]

    async def test_update_person(self, client: AsyncClient, person):
        res = await client.put(f"/api/people/{person.id}", json={"notes": "Night shift"})
        assert res.status_code == 200
        assert res.json()["notes"] == "Night shift"
        assert res.json()["name"] == "Bruce Wayne"

    async def test_change_and_clear_role(self, client: AsyncClient, space, person):
        role = (await client.post(f"/api/spaces/{space.id}/roles", json={"name": "Detective"})).json()

        res = await client.put(f"/api/people/{person.id}", json={"space_role_id": role["id"]})
        assert res.status_code == 200
        assert res.json()["space_role_id"] == role["id"]

        res = await client.put(f"/api/people/{person.id}", json={"space_role_id": None})
        assert res.json()["space_role_id"] is None

    async def test_update_unknown_person(self, client: AsyncClient):
        res = await client.put(f"/api/people/{uuid.uuid4()}", json={"notes": "?"})
        assert res.status_code == 404

    async def test_delete_person_removes_assignments(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        await make_assignment(person, products["one"])
        await make_assignment(person, products["two"], None, True)

        res = await client.delete(f"/api/people/{person.id}")
        assert res.status_code == 200

        assert (await client.get(f"/api/spaces/{space.id}/people")).json() == []
        assert (await client.get(f"/api/assignments/{space.id}/date/2019-03-01")).json() == []

    async def test_delete_unknown_person(self, client: AsyncClient):
        res = await client.delete(f"/api/people/{uuid.uuid4()}")
        assert res.status_code == 404
