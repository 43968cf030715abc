"""
Domain package for the HIBP lookup client.

Exports the breach and paste records returned by the lookup operations.
Keep this package focused on data definitions and validation concerns.
"""

from hibp_client.domain.models import BreachRecord, PasteRecord

__all__ = [
    "BreachRecord",
    "PasteRecord",
]
