"""Result page model.

Turns a lookup outcome into what the result page shows.
Pure Python - no Streamlit calls.
"""

from dataclasses import dataclass, field
from enum import Enum

from src.config.settings import DisplayConfig
from src.core.domain_models import Found, LookupOutcome, NotFound, StillLoading


class Illustration(str, Enum):
    """Static pictures shipped in src/app/assets."""

    RIGHT = "right"
    WRONG = "wrong"


@dataclass
class ResultCard:
    # Either a bundled Illustration or a remote image URL taken from the row
    image: Illustration | str
    fields: list[tuple[str, str]] = field(default_factory=list)
    message: str | None = None

    @property
    def is_found(self) -> bool:
        return self.message is None


def looks_like_url(value: str | None) -> bool:
    return bool(value) and str(value).startswith("http")


def build_result_card(outcome: LookupOutcome, display: DisplayConfig) -> ResultCard:
    """Map an outcome onto labeled fields and an illustration."""
    if isinstance(outcome, (NotFound, StillLoading)):
        return ResultCard(image=Illustration.WRONG, message=outcome.message)

    if not isinstance(outcome, Found):
        raise TypeError(f"Unsupported outcome: {outcome!r}")

    row = outcome.row
    fields = []
    for display_field in display.fields:
        value = row.get(display_field.column)
        fields.append((display_field.label, "" if value is None else str(value)))

    remark = row.get(display.remark_column)
    image: Illustration | str = remark if looks_like_url(remark) else Illustration.RIGHT
    return ResultCard(image=image, fields=fields)
