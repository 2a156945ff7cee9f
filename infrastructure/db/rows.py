"""Row parsing shared by the Supabase repositories."""
from typing import Any, Callable, Dict, List, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_rows(
    rows: Optional[List[Dict[str, Any]]],
    converter: Callable[[Dict[str, Any]], Optional[T]],
    table: str,
) -> List[T]:
    """
    Convert raw rows with `converter`, skipping rows that fail validation.

    A converter may also return None to drop a row on purpose.
    """
    parsed: List[T] = []
    for row in rows or []:
        try:
            item = converter(row)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Skipping malformed {table} row: {e}")
            continue
        if item is not None:
            parsed.append(item)
    return parsed
