# src/app/utils/randomizer.py
from __future__ import annotations
import random
from typing import Optional, Sequence

from app.models.schemas import Idea


def pick_random(pool: Sequence[Idea], rng: random.Random) -> Optional[Idea]:
    if not pool:
        return None
    return pool[rng.randrange(len(pool))]


def pick_different(
    pool: Sequence[Idea],
    previous: Optional[Idea],
    rng: random.Random,
    max_attempts: int = 10,
) -> Optional[Idea]:
    """
    "다시 돌리기": 직전 결과와 id가 다른 아이디어를 최대 max_attempts번 뽑아본다.
    pool이 1개면 그대로 반환하고, 모두 겹치면 마지막으로 뽑은 값을 반환한다 (같을 수도 있음).
    """
    if not pool:
        return None
    if len(pool) == 1:
        return pool[0]
    if previous is None:
        return pick_random(pool, rng)

    # 최소 한 번은 pool에서 뽑는다 (previous가 pool 밖일 수 있음)
    candidate = pick_random(pool, rng)
    for _ in range(max_attempts - 1):
        if candidate.id != previous.id:
            break
        candidate = pick_random(pool, rng)
    return candidate
