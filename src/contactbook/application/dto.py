"""Input DTOs for the contact use cases. Raw, unvalidated values as they arrive from a caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewContact:
    name: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class ContactChanges:
    """Partial update. None or "" means leave the field as is; a whitespace-only name is ignored too."""

    name: str | None = None
    phone: str | None = None
