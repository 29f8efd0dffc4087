"""Shared query parameter declarations."""
from typing import Annotated, Any, Optional

from fastapi import Query
from pydantic import BeforeValidator


def _blank_to_none(value: Any) -> Any:
    """Treat an empty query value (``?month=``) as omitted."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


MonthParam = Annotated[
    Optional[int],
    BeforeValidator(_blank_to_none),
    Query(
        ge=1,
        le=12,
        description="Calendar month of the sale date (1-12, any year). All months if omitted or empty.",
    ),
]
