"""위치 API 테스트.

Space location API tests — CRUD, case-insensitive name uniqueness,
last-modified tracking and products losing a deleted location.
"""

import uuid

from httpx import AsyncClient


def _url(space) -> str:
    return f"/api/spaces/{space.id}/locations"


class TestLocationCreate:
    """위치 추가 테스트."""

    async def test_add_location(self, client: AsyncClient, space):
        res = await client.post(_url(space), json={"name": "Detroit"})
        assert res.status_code == 201
        assert res.json()["name"] == "Detroit"
        assert res.json()["space_id"] == str(space.id)

    async def test_duplicate_name_ignores_case(self, client: AsyncClient, space):
        assert (await client.post(_url(space), json={"name": "Dearborn"})).status_code == 201
        res = await client.post(_url(space), json={"name": "dearborn"})
        assert res.status_code == 409

    async def test_blank_name(self, client: AsyncClient, space):
        res = await client.post(_url(space), json={"name": ""})
        assert res.status_code == 400

    async def test_unknown_space(self, client: AsyncClient):
        res = await client.post(f"/api/spaces/{uuid.uuid4()}/locations", json={"name": "Nowhere"})
        assert res.status_code == 404

    async def test_touches_space(self, client: AsyncClient, space):
        before = (await client.get(f"/api/spaces/{space.id}/last-modified")).json()
        assert before["last_modified_date"] is None

        await client.post(_url(space), json={"name": "Detroit"})

        after = (await client.get(f"/api/spaces/{space.id}/last-modified")).json()
        assert after["last_modified_date"] is not None


class TestLocationReadEdit:
    """위치 조회/수정 테스트."""

    async def test_list_locations(self, client: AsyncClient, space):
        await client.post(_url(space), json={"name": "Detroit"})
        await client.post(_url(space), json={"name": "Dearborn"})

        res = await client.get(_url(space))
        assert res.status_code == 200
        assert [loc["name"] for loc in res.json()] == ["Detroit", "Dearborn"]

    async def test_list_unknown_space(self, client: AsyncClient):
        res = await client.get(f"/api/spaces/{uuid.uuid4()}/locations")
        assert res.status_code == 404

    async def test_rename(self, client: AsyncClient, space):
        location = (await client.post(_url(space), json={"name": "Detroit"})).json()
        res = await client.put(f"{_url(space)}/{location['id']}", json={"name": "Ann Arbor"})
        assert res.status_code == 200
        assert res.json()["name"] == "Ann Arbor"
        assert res.json()["id"] == location["id"]

    async def test_rename_to_existing_name(self, client: AsyncClient, space):
        await client.post(_url(space), json={"name": "Detroit"})
        location = (await client.post(_url(space), json={"name": "Dearborn"})).json()

        res = await client.put(f"{_url(space)}/{location['id']}", json={"name": "DETROIT"})
        assert res.status_code == 409

    async def test_rename_unknown_location(self, client: AsyncClient, space):
        res = await client.put(f"{_url(space)}/{uuid.uuid4()}", json={"name": "Detroit"})
        assert res.status_code == 404


class TestLocationOnProducts:
    """제품 위치 참조 테스트."""

    async def test_product_with_location(self, client: AsyncClient, space, board):
        location = (await client.post(_url(space), json={"name": "Detroit"})).json()

        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Batmobile",
            "board_id": str(board.id),
            "space_location_id": location["id"],
        })
        assert res.status_code == 201
        assert res.json()["space_location_id"] == location["id"]

    async def test_product_with_unknown_location(self, client: AsyncClient, space, board):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Batmobile",
            "board_id": str(board.id),
            "space_location_id": str(uuid.uuid4()),
        })
        assert res.status_code == 404

    async def test_delete_unsets_location_on_products(self, client: AsyncClient, space, products):
        location = (await client.post(_url(space), json={"name": "Detroit"})).json()
        await client.put(f"/api/products/{products['one'].id}", json={
            "space_location_id": location["id"],
        })

        res = await client.delete(f"{_url(space)}/{location['id']}")
        assert res.status_code == 200

        assert (await client.get(_url(space))).json() == []
        listed = (await client.get(f"/api/spaces/{space.id}/products")).json()
        justice = next(p for p in listed if p["name"] == "Justice League")
        assert justice["space_location_id"] is None

    async def test_delete_unknown_location(self, client: AsyncClient, space):
        res = await client.delete(f"{_url(space)}/{uuid.uuid4()}")
        assert res.status_code == 404
