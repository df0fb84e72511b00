"""배정 타임라인 계산 — 기준/날짜 배정 해석과 재배정 차이 계산.

Assignment timeline computations shared by the assignment and reassignment
services. These functions are pure: they take rows already read from the
timeline store and never touch the database.

Effective Date Variant:
    Baseline  — 날짜 없는 기준 배정 (row has no effective date)
    Dated(on) — ``on`` 부터 적용되는 배정 (row applies from ``on`` onward)

Resolution Rule:
    For a requested date, the active set is every row sharing the latest
    effective date on or before it. Without any such row the baseline rows
    are active.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Protocol, Sequence
from uuid import UUID

# 여러 제품 이름 연결 구분자 — Separator for joined product names
PRODUCT_NAME_SEPARATOR: str = " & "


@dataclass(frozen=True)
class Baseline:
    """날짜 없는 기준 배정 — Undated baseline assignment."""


@dataclass(frozen=True)
class Dated:
    """날짜 있는 배정 — Assignment effective from ``on``."""

    on: date


EffectiveDate = Baseline | Dated


class TimelineRow(Protocol):
    """타임라인 계산에 필요한 배정 행 속성 — Row attributes the timeline reads."""

    product_id: UUID
    effective_date: date | None


@dataclass(frozen=True)
class ResolvedAssignments:
    """해석된 활성 배정 집합.

    Active assignment set for a person together with the anchor it was
    resolved from.

    Attributes:
        anchor: 활성 집합의 기준 (Baseline, or the effective date that produced the set)
        rows: 활성 배정 행 (Active rows, in store order)
    """

    anchor: EffectiveDate
    rows: tuple

    @property
    def product_ids(self) -> list[UUID]:
        """행 순서대로 중복 없는 제품 ID — Product ids in row order, deduplicated."""
        return list(dict.fromkeys(row.product_id for row in self.rows))


def effective_date_of(row: TimelineRow) -> EffectiveDate:
    """배정 행의 적용 시작일을 변형 타입으로 반환합니다."""
    if row.effective_date is None:
        return Baseline()
    return Dated(row.effective_date)


def resolve(
    dated_rows: Sequence[TimelineRow],
    baseline_rows: Sequence[TimelineRow],
) -> ResolvedAssignments:
    """활성 배정 집합을 해석합니다.

    Resolve the active set from a person's qualifying dated rows (already
    filtered to ``effective_date <= requested date`` and sorted ascending)
    and the person's baseline rows.

    Args:
        dated_rows: 요청일 이전 날짜 배정, 오름차순 (Qualifying dated rows, ascending)
        baseline_rows: 날짜 없는 배정 (Baseline rows)

    Returns:
        ResolvedAssignments: 최신 날짜의 모든 행, 없으면 기준 행
                             (All rows at the latest date, else the baseline rows)
    """
    if not dated_rows:
        return ResolvedAssignments(anchor=Baseline(), rows=tuple(baseline_rows))

    anchor: EffectiveDate = effective_date_of(dated_rows[-1])
    if not isinstance(anchor, Dated):
        raise ValueError("dated_rows must not contain undated assignments")

    rows = tuple(row for row in dated_rows if row.effective_date == anchor.on)
    return ResolvedAssignments(anchor=anchor, rows=rows)


def resolve_preceding(
    current: ResolvedAssignments,
    dated_rows: Sequence[TimelineRow],
    baseline_rows: Sequence[TimelineRow],
) -> ResolvedAssignments | None:
    """현재 집합 직전의 활성 배정 집합을 해석합니다.

    Resolve the set that was active right before ``current`` took effect:
    the rows at the immediately preceding distinct effective date, or the
    baseline rows when ``current`` came from the earliest dated rows.

    Returns:
        ResolvedAssignments | None: 직전 집합, 현재가 기준 배정이면 None
                                    (Preceding set; None when current is the baseline)
    """
    if isinstance(current.anchor, Baseline):
        return None

    anchor_date: date = current.anchor.on
    earlier = [
        row for row in dated_rows
        if row.effective_date is not None and row.effective_date < anchor_date
    ]
    return resolve(earlier, baseline_rows)


def join_product_names(
    product_ids: Iterable[UUID],
    product_names: dict[UUID, str],
) -> str:
    """제품 ID 목록을 " & "로 연결된 이름 문자열로 변환합니다."""
    names = [product_names[product_id] for product_id in product_ids if product_id in product_names]
    return PRODUCT_NAME_SEPARATOR.join(names)


def diff_product_names(
    previous: ResolvedAssignments | None,
    current: ResolvedAssignments,
    product_names: dict[UUID, str],
) -> tuple[str, str]:
    """직전/현재 집합 사이에서 빠진 제품과 추가된 제품 이름을 계산합니다.

    Compute the product names a person left and joined between two sets.

    Args:
        previous: 직전 활성 집합, 없으면 None (Preceding set, None if none)
        current: 현재 활성 집합 (Current set)
        product_names: 제품 ID → 이름 (Product id to name map)

    Returns:
        tuple[str, str]: (from 이름, to 이름) — 변경이 없으면 빈 문자열
                         (Joined "from" and "to" names; "" when empty)
    """
    previous_ids: list[UUID] = previous.product_ids if previous is not None else []
    current_ids: list[UUID] = current.product_ids

    removed = [product_id for product_id in previous_ids if product_id not in current_ids]
    added = [product_id for product_id in current_ids if product_id not in previous_ids]

    return join_product_names(removed, product_names), join_product_names(added, product_names)
