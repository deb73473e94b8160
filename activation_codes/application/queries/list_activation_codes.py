"""
ListActivationCodesQuery.

Query to list activation codes page by page.
"""
from dataclasses import dataclass

from core.domain.value_objects import DEFAULT_PAGE_SIZE


@dataclass
class ListActivationCodesQuery:
    """Query to list activation codes."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
