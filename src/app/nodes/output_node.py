# src/app/nodes/output_node.py
from typing import List

from app.models.schemas import DisplayLink, Idea, IdeaCard, PickResponse, SelectionResult
from app.utils.filters.categories import LINK_CATEGORIES, LINK_LABELS
from app.utils.tags import capitalize


def display_links(idea: Idea) -> List[DisplayLink]:
    """카테고리별 첫 번째 링크만 노출 (비어 있는 카테고리는 생략)."""
    links: List[DisplayLink] = []
    for cat in LINK_CATEGORIES:
        urls = getattr(idea.links, cat)
        if urls:
            links.append(DisplayLink(category=cat, label=LINK_LABELS[cat], url=urls[0]))
    return links


def idea_card(idea: Idea) -> IdeaCard:
    return IdeaCard(
        id=idea.id,
        title=idea.title,
        neighborhood=idea.neighborhood,
        time=idea.time,
        budget=idea.budget,
        meta=" · ".join(p for p in (idea.neighborhood, idea.time, idea.budget) if p),
        moods=list(idea.mood_tags),
        mood_labels=[capitalize(m) for m in idea.mood_tags],
        description=idea.description,
        why=idea.rationale,
        ada_accessible=idea.ada_accessible,
        links=idea.links,
        display_links=display_links(idea),
    )


def explain_text(result: SelectionResult) -> str | None:
    if result.idea is None:
        return result.message
    if not result.relaxed_tiers:
        return None
    return "No exact matches, relaxed filters: " + ", ".join(result.relaxed_tiers) + "."


def output_node(result: SelectionResult) -> PickResponse:
    """
    선택 결과를 프론트 응답 형태로 정리.
    - 정확히 일치: explain 없음
    - 완화됨: 어떤 필터를 풀었는지 설명
    - 실패: reason + 메시지, data 없음
    """
    return PickResponse(
        explain=explain_text(result),
        relaxed=list(result.relaxed_tiers),
        reason=result.reason,
        pool_size=result.pool_size,
        data=idea_card(result.idea) if result.idea is not None else None,
    )
