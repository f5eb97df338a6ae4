# src/app/utils/filters/relaxation.py
from __future__ import annotations
from typing import Callable, List, Sequence, Tuple

from app.models.schemas import FilterCriteria, Idea, LinkRequirements
from app.utils.filters.categories import RELAXATION_ORDER, TIMES
from app.utils.filters.hardfilter import filter_pool

RelaxStep = Tuple[str, Callable[[FilterCriteria], FilterCriteria]]

# 단계별로 누적 적용. ada_only는 어떤 단계에서도 풀지 않는다.
RELAXATION_LADDER: List[RelaxStep] = [
    ("budget", lambda c: c.model_copy(update={"budgets": frozenset()})),
    ("mood", lambda c: c.model_copy(update={"moods": frozenset()})),
    ("time", lambda c: c.model_copy(update={"times": frozenset(TIMES)})),
    ("links", lambda c: c.model_copy(update={"links": LinkRequirements()})),
]

assert tuple(tier for tier, _ in RELAXATION_LADDER) == RELAXATION_ORDER


def select_with_relaxation(
    dataset: Sequence[Idea],
    criteria: FilterCriteria,
) -> Tuple[List[Idea], List[str]]:
    """
    정확히 일치 -> budget 해제 -> mood 해제 -> time 전체 허용 -> links 해제.
    처음으로 비어있지 않은 pool에서 멈춘다.
    반환: (pool, relaxed_tiers). 마지막 단계까지 비어 있으면 ([], 전체 단계 목록).
    """
    relaxed: List[str] = []
    pool = filter_pool(dataset, criteria)
    for tier, relax in RELAXATION_LADDER:
        if pool:
            break
        criteria = relax(criteria)
        relaxed.append(tier)
        pool = filter_pool(dataset, criteria)
    return pool, relaxed
