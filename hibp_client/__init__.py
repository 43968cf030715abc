"""
hibp-client - Synchronous client for the Have I Been Pwned v3 API.

This package looks up security breaches and paste exposures by account,
by breach name, or across the whole breach catalogue:

- Breaches for an email address or username
- All breaches, optionally filtered by domain
- A single breach by its stable name
- Pastes for an email address

Every lookup is a single GET; a 404 becomes an empty result and every other
error status surfaces as a typed exception.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from hibp_client.client import (
    LookupClient,
    breach,
    breached_account,
    breaches,
    paste_account,
)
from hibp_client.config import Settings, get_settings
from hibp_client.domain.models import BreachRecord, PasteRecord
from hibp_client.errors import (
    DecodeError,
    HIBPError,
    InvalidFormat,
    RateLimited,
    StatusError,
    StatusKind,
    TransportError,
    Unauthorized,
    UnexpectedStatus,
    classify_status,
)
from hibp_client.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Client
    "LookupClient",
    "breach",
    "breached_account",
    "breaches",
    "paste_account",
    # Records
    "BreachRecord",
    "PasteRecord",
    # Errors
    "DecodeError",
    "HIBPError",
    "InvalidFormat",
    "RateLimited",
    "StatusError",
    "StatusKind",
    "TransportError",
    "Unauthorized",
    "UnexpectedStatus",
    "classify_status",
    # Logging
    "configure_logging",
    "get_logger",
]
