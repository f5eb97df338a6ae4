# src/app/utils/tags.py
from __future__ import annotations
import re
from typing import Any, List

TAG_DELIMITERS = re.compile(r"[|,;]")


def split_mood_value(value: Any) -> List[str]:
    """
    무드 태그 정규화.
    - 문자열: "Romantic | chill" -> ["romantic", "chill"]
    - 리스트: 각 문자열 항목도 구분자로 다시 분리, 문자열이 아닌 항목은 무시
    - 공백 제거, 소문자화, 빈 값/중복 제거 (처음 나온 순서 유지)
    """
    if not value:
        return []
    if isinstance(value, str):
        parts = TAG_DELIMITERS.split(value)
    elif isinstance(value, (list, tuple, set, frozenset)):
        parts = [p for v in value if isinstance(v, str) for p in TAG_DELIMITERS.split(v)]
    else:
        return []

    tags: List[str] = []
    for p in parts:
        tag = p.strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def capitalize(tag: str) -> str:
    return tag[:1].upper() + tag[1:] if tag else ""
