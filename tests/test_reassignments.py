"""재배정 API 테스트.

Reassignment API tests — Per-person product transitions on an exact date.
"""

import uuid

from httpx import AsyncClient

from tests.conftest import APR1, APR2, MAR1

URL = "/api/reassignment"


def _summary(data: list[dict]) -> list[tuple[str, str, str]]:
    return [(r["person"]["name"], r["from_product_name"], r["to_product_name"]) for r in data]


class TestReassignments:
    """날짜별 이동 내역 테스트."""

    async def test_exact_requested_date(self, client: AsyncClient, space, products, person, make_assignment):
        """요청일에 시작된 이동만 반환."""
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], APR1)
        await make_assignment(person, products["three"], APR2)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert res.status_code == 200
        data = res.json()
        assert _summary(data) == [("Bruce Wayne", "Justice League", "Avengers")]
        assert data[0]["person"]["id"] == str(person.id)

    async def test_multiple_historical_assignments(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        """긴 이력에서는 직전 날짜와만 비교."""
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], APR1)
        await make_assignment(person, products["three"], APR2)

        res = await client.get(f"{URL}/{space.id}/2019-04-02")
        assert _summary(res.json()) == [("Bruce Wayne", "Avengers", "Thor")]

    async def test_first_assignment_has_empty_from(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        await make_assignment(person, products["one"], MAR1)

        res = await client.get(f"{URL}/{space.id}/2019-03-01")
        assert _summary(res.json()) == [("Bruce Wayne", "", "Justice League")]

    async def test_changing_only_one_of_several(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], MAR1)
        await make_assignment(person, products["two"], APR1)
        await make_assignment(person, products["three"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert _summary(res.json()) == [("Bruce Wayne", "Justice League", "Thor")]

    async def test_multiple_people(
        self, client: AsyncClient, space, products, person, person_two, make_assignment
    ):
        """여러 사람의 이동은 각각 보고, 사람 생성 순서."""
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person_two, products["two"], MAR1)
        await make_assignment(person, products["two"], APR1)
        await make_assignment(person_two, products["one"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert _summary(res.json()) == [
            ("Bruce Wayne", "Justice League", "Avengers"),
            ("Diana Prince", "Avengers", "Justice League"),
        ]

    async def test_cancellation_has_empty_to(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], MAR1)
        await make_assignment(person, products["two"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert _summary(res.json()) == [("Bruce Wayne", "Justice League", "")]

    async def test_cancellation_and_move_for_two_people(
        self, client: AsyncClient, space, products, person, person_two, make_assignment
    ):
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], MAR1)
        await make_assignment(person, products["three"], APR1)
        await make_assignment(person_two, products["two"], MAR1)
        await make_assignment(person_two, products["one"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert _summary(res.json()) == [
            ("Bruce Wayne", "Justice League & Avengers", "Thor"),
            ("Diana Prince", "Avengers", "Justice League"),
        ]

    async def test_two_products_to_two_products(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        """여러 제품 이름은 행 생성 순서로 " & " 연결."""
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], MAR1)
        await make_assignment(person, products["three"], APR1)
        await make_assignment(person, products["four"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert _summary(res.json()) == [("Bruce Wayne", "Justice League & Avengers", "Thor & Hulk")]

    async def test_move_from_baseline(self, client: AsyncClient, space, products, person, make_assignment):
        """이전 날짜가 없으면 기준 배정과 비교."""
        await make_assignment(person, products["one"])
        await make_assignment(person, products["two"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert _summary(res.json()) == [("Bruce Wayne", "Justice League", "Avengers")]

    async def test_date_without_changes(self, client: AsyncClient, space, products, person, make_assignment):
        """요청일에 시작된 집합이 없으면 빈 목록."""
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["two"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-03-15")
        assert res.json() == []

    async def test_unchanged_set_not_reported(
        self, client: AsyncClient, space, products, person, make_assignment
    ):
        await make_assignment(person, products["one"], MAR1)
        await make_assignment(person, products["one"], APR1)

        res = await client.get(f"{URL}/{space.id}/2019-04-01")
        assert res.json() == []

    async def test_invalid_date(self, client: AsyncClient, space):
        res = await client.get(f"{URL}/{space.id}/2019-4-1")
        assert res.status_code == 400

    async def test_unknown_space(self, client: AsyncClient):
        res = await client.get(f"{URL}/{uuid.uuid4()}/2019-04-01")
        assert res.status_code == 404
