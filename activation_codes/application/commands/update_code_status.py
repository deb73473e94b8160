"""
UpdateCodeStatusCommand.

Command to enable or disable an activation code.
"""

from dataclasses import dataclass


@dataclass
class UpdateCodeStatusCommand:
    """Command to set the status of an activation code."""

    code_id: int
    status: str
