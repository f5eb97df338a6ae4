# src/app/api/replace.py
from fastapi import APIRouter, Depends, HTTPException

from app.models.schemas import PickResponse, ReplaceRequest
from app.nodes.output_node import output_node
from app.pipelines.pipeline import IdeaSelector, get_selector

router = APIRouter()


@router.post(
    "/ideas/replace",
    response_model=PickResponse,
    summary="다시 돌리기 (직전 결과와 다른 아이디어)",
)
def replace_idea(
    body: ReplaceRequest,
    selector: IdeaSelector = Depends(get_selector),
):
    print(f"🔁 [REPLACE] previous_id={body.previous_id}")
    try:
        result = selector.select_again(body.criteria, body.previous_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"previous idea {body.previous_id} not found")

    if result.idea is not None and body.previous_id is not None and result.idea.id == body.previous_id:
        print(f"⚠️ [REPLACE] 다른 아이디어를 찾지 못함 (pool={result.pool_size})")
    return output_node(result)
