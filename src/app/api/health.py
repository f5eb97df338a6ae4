from fastapi import APIRouter, Depends

from app.pipelines.pipeline import IdeaSelector, get_selector

router = APIRouter()


@router.get("/health")
def health(selector: IdeaSelector = Depends(get_selector)):
    return {"status": "ok", "ideas": len(selector)}
