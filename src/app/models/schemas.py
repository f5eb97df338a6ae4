# src/app/models/schemas.py
from __future__ import annotations
from typing import FrozenSet, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.filters.categories import LINK_CATEGORIES
from app.utils.tags import split_mood_value

TimeOfDay = Literal["day", "night"]
Budget = Literal["$", "$$", "$$$"]


# ===== Dataset =====
class IdeaLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    maps: Tuple[str, ...] = ()
    yelp: Tuple[str, ...] = ()
    websites: Tuple[str, ...] = ()

    @field_validator("maps", "yelp", "websites", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return () if v is None else v


class Idea(BaseModel):
    """데이트 아이디어 한 건 (앱 시작 시 한 번 로드, 이후 불변)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0, strict=True)
    title: str = Field(..., min_length=1)
    mood_tags: Tuple[str, ...] = Field((), alias="mood", description='"romantic|chill" 또는 ["romantic", "chill"]')
    time: TimeOfDay
    budget: Budget
    neighborhood: str = ""
    description: str = ""
    rationale: str = Field("", alias="why")
    links: IdeaLinks = Field(default_factory=IdeaLinks)
    ada_accessible: bool = Field(False, alias="adaAccessible")

    @field_validator("mood_tags", mode="before")
    @classmethod
    def _split_moods(cls, v):
        return split_mood_value(v)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("links", mode="before")
    @classmethod
    def _links_default(cls, v):
        return {} if v is None else v


# ===== Request =====
class LinkRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    maps: bool = False
    yelp: bool = False
    websites: bool = False

    def required(self) -> List[str]:
        return [cat for cat in LINK_CATEGORIES if getattr(self, cat)]


class FilterCriteria(BaseModel):
    """빈 값 = 해당 facet 제약 없음."""

    model_config = ConfigDict(frozen=True)

    moods: FrozenSet[str] = frozenset()
    times: FrozenSet[TimeOfDay] = frozenset()
    budgets: FrozenSet[Budget] = frozenset()
    links: LinkRequirements = Field(default_factory=LinkRequirements)
    ada_only: bool = False

    @field_validator("moods", mode="before")
    @classmethod
    def _normalize_moods(cls, v):
        return frozenset(split_mood_value(v))

    @field_validator("times", "budgets", mode="before")
    @classmethod
    def _single_value_as_set(cls, v):
        # "day" 처럼 단일 문자열도 허용 (moods와 동일)
        return [v] if isinstance(v, str) else v


class ReplaceRequest(BaseModel):
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    previous_id: Optional[int] = Field(None, description="직전에 뽑힌 아이디어 id (없으면 새로 뽑기)")


# ===== Selection =====
class SelectionResult(BaseModel):
    idea: Optional[Idea] = None
    relaxed_tiers: List[str] = Field(default_factory=list)
    pool_size: int = 0
    reason: Optional[str] = None  # None | "empty_dataset" | "no_match"
    message: Optional[str] = None

    @property
    def relaxed(self) -> bool:
        return bool(self.relaxed_tiers)


# ===== Response =====
class DisplayLink(BaseModel):
    category: str
    label: str
    url: str


class IdeaCard(BaseModel):
    id: int
    title: str
    neighborhood: str
    time: TimeOfDay
    budget: Budget
    meta: str
    moods: List[str]
    mood_labels: List[str]
    description: str
    why: str
    ada_accessible: bool
    links: IdeaLinks
    display_links: List[DisplayLink]


class PickResponse(BaseModel):
    explain: Optional[str] = None
    relaxed: List[str] = Field(default_factory=list)
    reason: Optional[str] = None
    pool_size: int = 0
    data: Optional[IdeaCard] = None


class FacetsResponse(BaseModel):
    moods: List[str]
    times: List[str]
    budgets: List[str]
    links: List[str]
