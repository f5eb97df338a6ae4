# src/app/api/recommends.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.models.schemas import FacetsResponse, FilterCriteria, Idea, PickResponse
from app.nodes.output_node import output_node
from app.pipelines.pipeline import IdeaSelector, get_selector
from app.utils.filters.categories import BUDGETS, LINK_CATEGORIES, TIMES

router = APIRouter()


@router.post("/ideas/pick", response_model=PickResponse, summary="필터에 맞는 아이디어 하나 뽑기")
def pick_idea(
    body: FilterCriteria,
    selector: IdeaSelector = Depends(get_selector),
):
    """
    Request Body (모두 선택):
    {
      "moods": ["chill"], "times": ["night"], "budgets": ["$"],
      "links": {"maps": true, "yelp": false, "websites": false},
      "ada_only": false
    }
    결과가 없으면 budget -> mood -> time -> links 순서로 필터를 풀어서 다시 찾는다.
    """
    print(f"📡 [PICK] criteria = {body.model_dump(mode='json')}")
    result = selector.select(body)
    return output_node(result)


@router.get("/ideas", response_model=List[Idea], summary="전체 아이디어 목록")
def list_ideas(selector: IdeaSelector = Depends(get_selector)):
    return list(selector.dataset)


@router.get("/ideas/{idea_id}", response_model=Idea)
def get_idea(idea_id: int, selector: IdeaSelector = Depends(get_selector)):
    idea = selector.get(idea_id)
    if idea is None:
        raise HTTPException(status_code=404, detail=f"idea {idea_id} not found")
    return idea


@router.get("/facets", response_model=FacetsResponse, summary="필터 칩 옵션")
def get_facets(selector: IdeaSelector = Depends(get_selector)):
    return FacetsResponse(
        moods=selector.mood_options(),
        times=list(TIMES),
        budgets=list(BUDGETS),
        links=list(LINK_CATEGORIES),
    )
