"""
GetCodeAccountsQuery.

Query to get the accounts registered under the caller's code.
"""
from dataclasses import dataclass


@dataclass
class GetCodeAccountsQuery:
    """Query to list accounts for a code."""

    code_id: int
