"""
Index Mapping Layer: Transforms decoded spreadsheet rows into the lookup index.

Rows come from the extractor as plain dictionaries; this module locates the
identifier column and keys every row by its normalized identifier.
"""

from loguru import logger

from src.core.domain_models import ID_COLUMN, LookupIndex, Row
from src.core.exceptions import MissingIdentifierColumnError
from src.core.normalization import match_column, normalize_identifier


def build_lookup_index(rows: list[Row], id_column: str = ID_COLUMN) -> LookupIndex:
    """
    Build the identifier index from spreadsheet rows.

    The identifier column is located from the first row's keys (whitespace
    around the header is ignored, case is not). Rows with an empty identifier
    are skipped; when an identifier repeats, the later row wins.

    Args:
        rows: Decoded rows in sheet order
        id_column: Header name of the identifier column

    Returns:
        Immutable LookupIndex

    Raises:
        MissingIdentifierColumnError: If no header matches `id_column`
    """
    header = list(rows[0].keys()) if rows else []
    column_key = match_column(header, id_column)
    if column_key is None:
        raise MissingIdentifierColumnError(id_column, header)

    entries: dict[str, Row] = {}
    skipped = 0
    duplicates = 0
    for row in rows:
        key = normalize_identifier(row.get(column_key))
        if not key:
            skipped += 1
            continue
        if key in entries:
            duplicates += 1
        entries[key] = row

    if skipped:
        logger.debug(f"Skipped {skipped} rows without an identifier")
    if duplicates:
        logger.warning(f"{duplicates} duplicate identifiers found; later rows replace earlier ones")

    logger.info(f"Indexed {len(entries)} identifiers from {len(rows)} rows")
    return LookupIndex(id_column=column_key, entries=entries, row_count=len(rows))
