"""Wire and action vocabularies shared by the controller and its links."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class FindOperation(str, Enum):
    """Operations understood by the search engine."""

    FIND = "find"
    FIND_NEXT = "find_next"
    FIND_PREVIOUS = "find_previous"


class FindAction(str, Enum):
    """Standard find-interface actions a host may route to the dispatcher."""

    SHOW = "show"
    HIDE = "hide"
    NEXT_MATCH = "next-match"
    PREVIOUS_MATCH = "previous-match"
    SET_SEARCH_STRING = "set-search-string"
    REPLACE = "replace"
    REPLACE_ALL = "replace-all"
    REPLACE_AND_FIND = "replace-and-find"
    REPLACE_ALL_IN_SELECTION = "replace-all-in-selection"
    SELECT_ALL = "select-all"
    SELECT_ALL_IN_SELECTION = "select-all-in-selection"
    SHOW_REPLACE_INTERFACE = "show-replace-interface"
    HIDE_REPLACE_INTERFACE = "hide-replace-interface"

    @classmethod
    def parse(cls, value: "FindAction | str") -> "FindAction | None":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class SearchRequest(BaseModel):
    operation: FindOperation
    params: dict[str, Any] = Field(default_factory=dict)
    view_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "method": self.operation.value,
            "params": dict(self.params),
        }
        if self.view_id is not None:
            payload["view_id"] = self.view_id
        return payload


__all__ = [
    "FindAction",
    "FindOperation",
    "SearchRequest",
]
