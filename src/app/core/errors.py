# src/app/core/errors.py
from __future__ import annotations
from typing import Any, List, Optional, Sequence


class IdeaSelectorError(Exception):
    """Base error. `reason` is the machine-readable code echoed in API responses."""

    reason = "error"


class EmptyDatasetError(IdeaSelectorError):
    reason = "empty_dataset"

    def __init__(self, message: str = "No ideas available (dataset empty).") -> None:
        super().__init__(message)


class NoMatchError(IdeaSelectorError):
    reason = "no_match"

    def __init__(self, relaxed_tiers: Sequence[str]) -> None:
        self.relaxed_tiers: List[str] = list(relaxed_tiers)
        super().__init__(
            "No ideas match, even with relaxed filters: " + ", ".join(self.relaxed_tiers) + "."
        )


class InvalidRecordError(IdeaSelectorError, ValueError):
    reason = "invalid_record"

    def __init__(self, detail: str, *, index: Optional[int] = None, record_id: Any = None) -> None:
        self.detail = detail
        self.index = index
        self.record_id = record_id
        where = f"record #{index}" if index is not None else "record"
        if record_id is not None:
            where += f" (id={record_id})"
        super().__init__(f"{where}: {detail}")
