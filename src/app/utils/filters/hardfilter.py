# src/app/utils/filters/hardfilter.py
from __future__ import annotations
from typing import Iterable, List

from app.models.schemas import FilterCriteria, Idea


def match_idea(idea: Idea, criteria: FilterCriteria) -> bool:
    # 무드: 하나라도 겹치면 통과 (facet 내부 OR)
    if criteria.moods and criteria.moods.isdisjoint(idea.mood_tags):
        return False
    if criteria.times and idea.time not in criteria.times:
        return False
    if criteria.budgets and idea.budget not in criteria.budgets:
        return False
    # 필수 링크: 요구된 카테고리는 비어 있으면 안 됨
    for cat in criteria.links.required():
        if not getattr(idea.links, cat):
            return False
    if criteria.ada_only and not idea.ada_accessible:
        return False
    return True


def filter_pool(dataset: Iterable[Idea], criteria: FilterCriteria) -> List[Idea]:
    return [idea for idea in dataset if match_idea(idea, criteria)]
