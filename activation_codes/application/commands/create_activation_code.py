"""
CreateActivationCodeCommand.

Command to create a new activation code.
"""

from dataclasses import dataclass


@dataclass
class CreateActivationCodeCommand:
    """Command to create an activation code."""

    duration_days: int
    max_accounts: int
