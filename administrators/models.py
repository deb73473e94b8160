"""
Administrators models.

Re-exported from the infrastructure layer so Django registers them.
"""
from administrators.infrastructure.models import Administrator  # noqa: F401
