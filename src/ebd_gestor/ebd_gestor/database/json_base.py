from __future__ import annotations

import logging
from typing import Any, Callable, List, TypeVar

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_rows(rows: Any, to_model: Callable[[dict], T], kind: str) -> List[T]:
    """Map stored rows to models, skipping (and logging) the broken ones.

    One bad row must not take the whole listing down with it.
    """
    out: List[T] = []
    for row in rows or []:
        if not isinstance(row, dict):
            logger.warning("Skipping %s row of type %s", kind, type(row).__name__)
            continue
        try:
            out.append(to_model(row))
        except ValidationError as e:
            logger.warning("Skipping %s row %r: %s", kind, row.get("id"), e)
    return out
