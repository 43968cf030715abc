"""
Domain models for the HIBP lookup client.

Field names follow Python conventions; the PascalCase aliases match the
service's wire format exactly. Every field has a zero value so that absent
attributes decode cleanly and a not-found breach lookup can return an empty
record instead of raising.
"""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class _WireModel(BaseModel):
    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_empty(self) -> bool:
        """True when every field still holds its zero value."""
        return self == type(self)()

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with wire names, omitting zero-valued fields."""
        return self.model_dump(by_alias=True, exclude_defaults=True)


class BreachRecord(_WireModel):
    """
    A single breach event.

    `name` is the stable identifier; `title` is a display name that may
    change over time. Two records with the same `name` describe the same
    breach.
    """

    name: str = Field("", alias="Name")
    title: str = Field("", alias="Title")
    domain: str = Field("", alias="Domain")
    breach_date: str = Field("", alias="BreachDate")
    added_date: str = Field("", alias="AddedDate")
    modified_date: str = Field("", alias="ModifiedDate")
    pwn_count: int = Field(0, ge=0, alias="PwnCount")
    description: str = Field("", alias="Description")
    data_classes: List[str] = Field(default_factory=list, alias="DataClasses")
    is_verified: bool = Field(False, alias="IsVerified")
    is_fabricated: bool = Field(False, alias="IsFabricated")
    is_sensitive: bool = Field(False, alias="IsSensitive")
    is_retired: bool = Field(False, alias="IsRetired")
    is_spam_list: bool = Field(False, alias="IsSpamList")
    logo_path: str = Field("", alias="LogoPath")

    @property
    def key(self) -> str:
        return self.name


class PasteRecord(_WireModel):
    """A paste that exposed one or more email addresses."""

    source: str = Field("", alias="Source")
    id: str = Field("", alias="Id")
    title: str = Field("", alias="Title")
    date: str = Field("", alias="Date")
    email_count: int = Field(0, ge=0, alias="EmailCount")


__all__ = ["BreachRecord", "PasteRecord"]
