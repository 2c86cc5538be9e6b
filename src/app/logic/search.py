"""Identifier lookup against the session's index."""

from loguru import logger

from src.core.domain_models import (
    NOT_FOUND_MESSAGE,
    Found,
    LookupOutcome,
    NotFound,
    SearchState,
    StillLoading,
)
from src.core.normalization import normalize_identifier


def search(
    state: SearchState,
    query: str,
    not_found_message: str = NOT_FOUND_MESSAGE,
) -> LookupOutcome:
    """Exact-match lookup of a free-text identifier.

    Args:
        state: Settled (or still loading) search state
        query: Identifier as typed by the user
        not_found_message: Message carried by the fallback outcome

    Returns:
        StillLoading while the index is being built, Found with the untouched
        row on a hit, NotFound otherwise (including when no index exists)
    """
    if state.is_loading:
        return StillLoading()

    key = normalize_identifier(query)
    if state.index is None:
        logger.debug(f"Lookup for '{key}' without an index")
        return NotFound(message=not_found_message)

    row = state.index.get(key)
    if row is None:
        logger.info(f"No match for '{key}'")
        return NotFound(message=not_found_message)

    logger.info(f"Match for '{key}'")
    return Found(row=row)
