from __future__ import annotations
import random
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

from app.core.errors import EmptyDatasetError, IdeaSelectorError, NoMatchError
from app.core.settings import IDEAS_DATA_PATH, IDEAS_STRICT_LOAD, PICK_MAX_ATTEMPTS, RANDOM_SEED
from app.models.schemas import FilterCriteria, Idea, SelectionResult
from app.nodes.data_ingestion import load_dataset_file
from app.utils.filters.relaxation import select_with_relaxation
from app.utils.randomizer import pick_different, pick_random


class IdeaSelector:
    """
    읽기 전용 dataset + 주입된 random source.
    상태를 바꾸는 건 rng 소비뿐이라 요청 간에 공유해도 된다.
    """

    def __init__(
        self,
        dataset: Sequence[Idea],
        *,
        rng: Optional[random.Random] = None,
        max_attempts: int = PICK_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.dataset: Tuple[Idea, ...] = tuple(dataset)
        self.rng = rng or random.Random(RANDOM_SEED)
        self.max_attempts = max_attempts
        self._by_id: Dict[int, Idea] = {idea.id: idea for idea in self.dataset}

    def __len__(self) -> int:
        return len(self.dataset)

    def get(self, idea_id: int) -> Optional[Idea]:
        return self._by_id.get(idea_id)

    def mood_options(self) -> List[str]:
        return sorted({tag for idea in self.dataset for tag in idea.mood_tags})

    def find(self, criteria: FilterCriteria) -> Tuple[List[Idea], List[str]]:
        return select_with_relaxation(self.dataset, criteria)

    def _resolve_pool(self, criteria: FilterCriteria) -> Tuple[List[Idea], List[str]]:
        if not self.dataset:
            raise EmptyDatasetError()
        pool, relaxed = self.find(criteria)
        if not pool:
            raise NoMatchError(relaxed)
        print(f"🎯 [SELECT] tier={len(relaxed)} relaxed={relaxed} pool={len(pool)}")
        return pool, relaxed

    @staticmethod
    def _failed(e: IdeaSelectorError) -> SelectionResult:
        print(f"❌ [SELECT] {e.reason}: {e}")
        return SelectionResult(
            idea=None,
            relaxed_tiers=getattr(e, "relaxed_tiers", []),
            pool_size=0,
            reason=e.reason,
            message=str(e),
        )

    def select(self, criteria: FilterCriteria) -> SelectionResult:
        try:
            pool, relaxed = self._resolve_pool(criteria)
        except IdeaSelectorError as e:
            return self._failed(e)
        return SelectionResult(
            idea=pick_random(pool, self.rng),
            relaxed_tiers=relaxed,
            pool_size=len(pool),
        )

    def select_again(self, criteria: FilterCriteria, previous_id: Optional[int]) -> SelectionResult:
        """직전 결과와 다른 아이디어 뽑기. 알 수 없는 previous_id는 KeyError."""
        if not self.dataset:
            return self._failed(EmptyDatasetError())
        if previous_id is None:
            return self.select(criteria)
        previous = self.get(previous_id)
        if previous is None:
            raise KeyError(previous_id)

        try:
            pool, relaxed = self._resolve_pool(criteria)
        except IdeaSelectorError as e:
            return self._failed(e)
        return SelectionResult(
            idea=pick_different(pool, previous, self.rng, max_attempts=self.max_attempts),
            relaxed_tiers=relaxed,
            pool_size=len(pool),
        )


@lru_cache(maxsize=1)
def get_selector() -> IdeaSelector:
    """FastAPI dependency: 프로세스당 한 번 dataset 로드."""
    return IdeaSelector(load_dataset_file(IDEAS_DATA_PATH, strict=IDEAS_STRICT_LOAD))
