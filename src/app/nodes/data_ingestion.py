# src/app/nodes/data_ingestion.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError

from app.core.errors import InvalidRecordError
from app.models.schemas import Idea


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ())) or "record"
    return f"{loc}: {err.get('msg')}"


def normalize_record(raw: Any, index: int | None = None) -> Idea:
    """원본 레코드 1건을 Idea로 정규화. 필수 필드(id/title/time/budget) 누락이나 enum 범위 밖이면 InvalidRecordError."""
    if not isinstance(raw, Mapping):
        raise InvalidRecordError(f"expected an object, got {type(raw).__name__}", index=index)
    try:
        return Idea.model_validate(raw)
    except ValidationError as e:
        raise InvalidRecordError(_first_error(e), index=index, record_id=raw.get("id")) from e


def load_dataset(raw_records: Iterable[Any], *, strict: bool = False) -> List[Idea]:
    """
    앱 시작 시 한 번 실행.
    - 기본 정책: 잘못된 레코드는 경고 후 건너뜀 (나머지는 계속 사용)
    - strict=True: 첫 번째 잘못된 레코드에서 InvalidRecordError
    """
    ideas: List[Idea] = []
    skipped = 0
    for idx, raw in enumerate(raw_records):
        try:
            ideas.append(normalize_record(raw, idx))
        except InvalidRecordError as e:
            if strict:
                raise
            skipped += 1
            print(f"⚠️ [DATA] 레코드 건너뜀 - {e}")

    print(f"✅ [DATA] ideas 로드 완료: {len(ideas)}개 (건너뜀 {skipped}개)")
    return ideas


def load_dataset_file(path: Union[str, Path], *, strict: bool = False) -> List[Idea]:
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON array of ideas, got {type(raw).__name__}")
    print(f"📂 [DATA] {path} 에서 {len(raw)}개 레코드 읽음")
    return load_dataset(raw, strict=strict)
