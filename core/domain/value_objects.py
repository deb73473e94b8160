"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import math
from abc import ABC
from dataclasses import dataclass
from enum import Enum

from core.domain.exceptions import ValidationError

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


class CodeStatus(Enum):
    """Administrator-controlled status of an activation code."""

    ENABLED = "enabled"
    DISABLED = "disabled"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> "CodeStatus":
        """
        Parse a raw status string.

        Raises:
            ValidationError: If the value is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(status.value for status in cls)
            raise ValidationError(f"Invalid status '{value}', expected one of: {allowed}")


class CodeValidity(Enum):
    """Live validity of an activation code, derived at every access."""

    VALID = "valid"
    DISABLED = "disabled"
    EXPIRED = "expired"

    def __str__(self) -> str:
        """Return validity as string."""
        return self.value


@dataclass(frozen=True)
class PageRequest(ValueObject):
    """Normalized pagination window."""

    page: int
    page_size: int

    @classmethod
    def normalize(cls, page: int, page_size: int, max_page_size: int) -> "PageRequest":
        """
        Build a page request, clamping out-of-range values.

        Args:
            page: Requested page (values below 1 become 1)
            page_size: Requested page size (values below 1 become the default,
                values above max_page_size are clamped)
            max_page_size: Upper bound for page_size

        Returns:
            PageRequest instance
        """
        if page < 1:
            page = 1
        if page_size < 1:
            page_size = DEFAULT_PAGE_SIZE
        page_size = min(page_size, max_page_size)
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        """Row offset of the first item on this page."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Maximum number of rows on this page."""
        return self.page_size

    def total_pages(self, total: int) -> int:
        """Number of pages needed for total rows."""
        return math.ceil(total / self.page_size)
