"""배정 타임라인 해석/비교 단위 테스트.

Timeline unit tests — Active-set resolution and product diffs, no database.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date

import pytest

from peoplemover.services.timeline import (
    Baseline,
    Dated,
    diff_product_names,
    effective_date_of,
    join_product_names,
    resolve,
    resolve_preceding,
)

MAR1 = date(2019, 3, 1)
APR1 = date(2019, 4, 1)
APR2 = date(2019, 4, 2)

JL = uuid.uuid4()
AV = uuid.uuid4()
TH = uuid.uuid4()
HK = uuid.uuid4()
NAMES = {JL: "Justice League", AV: "Avengers", TH: "Thor", HK: "Hulk"}


@dataclass
class Row:
    product_id: uuid.UUID
    effective_date: date | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)


class TestEffectiveDate:
    """적용 시작일 변형 테스트."""

    def test_undated_row_is_baseline(self):
        assert effective_date_of(Row(JL)) == Baseline()

    def test_dated_row(self):
        assert effective_date_of(Row(JL, MAR1)) == Dated(MAR1)

    def test_variants_compare_by_value(self):
        assert Dated(MAR1) == Dated(date(2019, 3, 1))
        assert Dated(MAR1) != Dated(APR1)
        assert Baseline() != Dated(MAR1)


class TestResolve:
    """활성 배정 집합 해석 테스트."""

    def test_baseline_only(self):
        """날짜 있는 행이 없으면 기준 행 전체."""
        baseline = [Row(JL), Row(AV)]
        resolved = resolve([], baseline)
        assert resolved.anchor == Baseline()
        assert resolved.product_ids == [JL, AV]

    def test_no_rows_at_all(self):
        resolved = resolve([], [])
        assert resolved.anchor == Baseline()
        assert resolved.rows == ()

    def test_latest_date_wins(self):
        """가장 최근 날짜의 행만 활성."""
        dated = [Row(JL, MAR1), Row(AV, APR1)]
        resolved = resolve(dated, [Row(TH)])
        assert resolved.anchor == Dated(APR1)
        assert resolved.product_ids == [AV]

    def test_same_day_split(self):
        """같은 날짜의 여러 행이 모두 활성."""
        dated = [Row(JL, MAR1), Row(AV, MAR1)]
        resolved = resolve(dated, [])
        assert resolved.anchor == Dated(MAR1)
        assert resolved.product_ids == [JL, AV]

    def test_duplicate_products_collapse(self):
        dated = [Row(JL, MAR1), Row(JL, MAR1)]
        assert resolve(dated, []).product_ids == [JL]

    def test_undated_row_among_dated_rejected(self):
        with pytest.raises(ValueError):
            resolve([Row(JL, MAR1), Row(AV)], [])


class TestResolvePreceding:
    """직전 활성 집합 해석 테스트."""

    def test_baseline_has_no_preceding(self):
        current = resolve([], [Row(JL)])
        assert resolve_preceding(current, [], [Row(JL)]) is None

    def test_first_dated_set_falls_back_to_baseline(self):
        baseline = [Row(JL)]
        dated = [Row(AV, APR1)]
        current = resolve(dated, baseline)
        previous = resolve_preceding(current, dated, baseline)
        assert previous.anchor == Baseline()
        assert previous.product_ids == [JL]

    def test_first_dated_set_without_baseline_is_empty(self):
        dated = [Row(JL, MAR1)]
        current = resolve(dated, [])
        previous = resolve_preceding(current, dated, [])
        assert previous.rows == ()

    def test_only_immediately_preceding_date_counts(self):
        """3단계 이력에서 바로 이전 날짜만 비교."""
        dated = [Row(JL, MAR1), Row(AV, APR1), Row(TH, APR2)]
        current = resolve(dated, [])
        previous = resolve_preceding(current, dated, [])
        assert previous.anchor == Dated(APR1)
        assert previous.product_ids == [AV]


class TestDiffProductNames:
    """제품 이동 이름 계산 테스트."""

    def test_first_assignment(self):
        current = resolve([Row(JL, MAR1)], [])
        assert diff_product_names(resolve([], []), current, NAMES) == ("", "Justice League")

    def test_no_previous_set(self):
        current = resolve([Row(JL, MAR1)], [])
        assert diff_product_names(None, current, NAMES) == ("", "Justice League")

    def test_simple_move(self):
        previous = resolve([Row(JL, MAR1)], [])
        current = resolve([Row(AV, APR1)], [])
        assert diff_product_names(previous, current, NAMES) == ("Justice League", "Avengers")

    def test_cancellation(self):
        previous = resolve([Row(JL, MAR1), Row(AV, MAR1)], [])
        current = resolve([Row(AV, APR1)], [])
        assert diff_product_names(previous, current, NAMES) == ("Justice League", "")

    def test_multi_product_move_keeps_row_order(self):
        previous = resolve([Row(JL, MAR1), Row(AV, MAR1)], [])
        current = resolve([Row(TH, APR1), Row(HK, APR1)], [])
        assert diff_product_names(previous, current, NAMES) == (
            "Justice League & Avengers",
            "Thor & Hulk",
        )

    def test_unchanged_set(self):
        previous = resolve([Row(JL, MAR1)], [])
        current = resolve([Row(JL, APR1)], [])
        assert diff_product_names(previous, current, NAMES) == ("", "")

    def test_join_skips_unknown_products(self):
        assert join_product_names([JL, uuid.uuid4(), AV], NAMES) == "Justice League & Avengers"
