"""
GetCodeInfoQuery.

Query to get usage information about the caller's code.
"""
from dataclasses import dataclass


@dataclass
class GetCodeInfoQuery:
    """Query to get code info."""

    code_id: int
