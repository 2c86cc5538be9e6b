from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict

# --- Constants ---

ID_COLUMN = "Stud UID"
NOT_FOUND_MESSAGE = "Bus Facility is not available."
NOT_FOUND_MARKER = "wrong"
STILL_LOADING_MESSAGE = "Data is still loading, please wait."

# One spreadsheet record: header name -> cell text (None for empty cells).
# Key order follows the header row.
Row = dict[str, str | None]


# --- Lookup Index ---


@dataclass(frozen=True)
class LookupIndex:
    """
    Read-only mapping from normalized identifier to its spreadsheet row.

    `id_column` is the header key exactly as it appeared in the sheet,
    which may carry surrounding whitespace.
    """

    id_column: str
    entries: Mapping[str, Row] = field(default_factory=dict)
    row_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, key: str) -> Row | None:
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class SearchState:
    """Session-local state owned by the search page."""

    index: LookupIndex | None = None
    is_loading: bool = True

    @property
    def is_available(self) -> bool:
        return self.index is not None


# --- Lookup Outcomes ---


class Found(BaseModel):
    """The identifier matched a row; the row is passed through unmodified."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    row: Row


class NotFound(BaseModel):
    """No row for the identifier, or the index was never built."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"
    message: str = NOT_FOUND_MESSAGE
    marker: str = NOT_FOUND_MARKER


class StillLoading(BaseModel):
    """The index has not settled yet. Shown as a status message, no navigation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["still_loading"] = "still_loading"
    message: str = STILL_LOADING_MESSAGE


LookupOutcome = Found | NotFound | StillLoading
