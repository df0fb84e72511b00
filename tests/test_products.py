"""제품 API 테스트.

Product API tests — CRUD, validation, and cascade delete with the
unassigned fallback.
"""

import uuid

from httpx import AsyncClient

from tests.conftest import MAR1


class TestProductCreate:
    """제품 생성 테스트."""

    async def test_create_product(self, client: AsyncClient, space, board):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Wonder Twins",
            "board_id": str(board.id),
            "notes": "Form of a bucket",
            "start_date": "2019-01-01",
        })
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Wonder Twins"
        assert data["board_id"] == str(board.id)
        assert data["start_date"] == "2019-01-01"
        assert data["end_date"] is None
        assert data["archived"] is False

    async def test_empty_name(self, client: AsyncClient, space, board):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "  ",
            "board_id": str(board.id),
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid Product"

    async def test_duplicate_name_on_board(self, client: AsyncClient, space, board, products):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Justice League",
            "board_id": str(board.id),
        })
        assert res.status_code == 409

    async def test_same_name_on_other_board(self, client: AsyncClient, space, other_board, products):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Justice League",
            "board_id": str(other_board.id),
        })
        assert res.status_code == 201

    async def test_unknown_board(self, client: AsyncClient, space):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Nowhere",
            "board_id": str(uuid.uuid4()),
        })
        assert res.status_code == 404

    async def test_notes_too_long(self, client: AsyncClient, space, board):
        res = await client.post(f"/api/spaces/{space.id}/products", json={
            "name": "Verbose",
            "board_id": str(board.id),
            "notes": "x" * 501,
        })
        assert res.status_code == 400


class TestProductReadUpdate:
    """제품 조회/수정 테스트."""

    async def test_list_products(self, client: AsyncClient, space, products):
        res = await client.get(f"/api/spaces/{space.id}/products")
        assert res.status_code == 200
        names = [p["name"] for p in res.json()]
        assert names == ["unassigned", "Justice League", "Avengers", "Thor", "Hulk"]

    async def test_update_product(self, client: AsyncClient, products):
        res = await client.put(f"/api/products/{products['one'].id}", json={
            "notes": "Founded 1960",
            "archived": True,
        })
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "Justice League"
        assert data["notes"] == "Founded 1960"
        assert data["archived"] is True

    async def test_rename_to_existing_name(self, client: AsyncClient, products):
        res = await client.put(f"/api/products/{products['one'].id}", json={"name": "Avengers"})
        assert res.status_code == 409

    async def test_update_notes_too_long(self, client: AsyncClient, products):
        res = await client.put(f"/api/products/{products['one'].id}", json={"notes": "x" * 501})
        assert res.status_code == 400

    async def test_update_unknown_product(self, client: AsyncClient):
        res = await client.put(f"/api/products/{uuid.uuid4()}", json={"notes": "?"})
        assert res.status_code == 404


class TestProductDelete:
    """제품 삭제 및 배정 연쇄 삭제 테스트."""

    async def test_delete_falls_back_to_unassigned(
        self, client: AsyncClient, board, products, person, make_assignment
    ):
        """유일한 배정의 제품 삭제 시 미배정 제품 배정만 남음."""
        await make_assignment(person, products["one"])

        res = await client.delete(f"/api/products/{products['one'].id}")
        assert res.status_code == 200

        data = (await client.get(f"/api/assignments/person/{person.id}")).json()
        assert len(data) == 1
        assert data[0]["product_id"] == str(board.unassigned_product_id)

    async def test_delete_keeps_other_assignments(
        self, client: AsyncClient, products, person, make_assignment
    ):
        await make_assignment(person, products["one"])
        await make_assignment(person, products["two"])

        await client.delete(f"/api/products/{products['one'].id}")

        data = (await client.get(f"/api/assignments/person/{person.id}")).json()
        assert [a["product_id"] for a in data] == [str(products["two"].id)]

    async def test_delete_removes_dated_rows(
        self, client: AsyncClient, space, products, person, person_two, make_assignment
    ):
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person_two, products["one"])
        await make_assignment(person_two, products["two"])

        await client.delete(f"/api/products/{products['one'].id}")

        res = await client.get(f"/api/assignments/{space.id}/date/2019-03-01")
        product_ids = [a["product_id"] for a in res.json()]
        assert str(products["one"].id) not in product_ids

        names = [p["name"] for p in (await client.get(f"/api/spaces/{space.id}/products")).json()]
        assert "Justice League" not in names

    async def test_cannot_delete_unassigned_product(self, client: AsyncClient, board):
        res = await client.delete(f"/api/products/{board.unassigned_product_id}")
        assert res.status_code == 400

    async def test_delete_unknown_product(self, client: AsyncClient):
        res = await client.delete(f"/api/products/{uuid.uuid4()}")
        assert res.status_code == 404
