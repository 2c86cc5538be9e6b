from collections.abc import Iterable


def normalize_identifier(value: str | None) -> str:
    """Normalizes an identifier for index keys and queries (trim + lowercase)."""
    if value is None:
        return ""
    return str(value).strip().lower()


def match_column(keys: Iterable[str], column: str) -> str | None:
    """Returns the first header key equal to `column` once surrounding whitespace is removed.

    Matching is case-sensitive; only the header side is trimmed.
    """
    for key in keys:
        if key.strip() == column:
            return key
    return None
