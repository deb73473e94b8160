"""
GetActivationCodeQuery.

Query to get an activation code with its accounts.
"""
from dataclasses import dataclass


@dataclass
class GetActivationCodeQuery:
    """Query to get an activation code by id."""

    code_id: int
