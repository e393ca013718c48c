"""
Contact book core: clean-architecture layout.

- domain: Contact entity, error taxonomy, phone normalization. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository).
"""

from contactbook.application import (
    ContactChanges,
    ContactRepository,
    ContactService,
    NewContact,
)
from contactbook.domain import (
    ConflictError,
    Contact,
    ContactError,
    NotFoundError,
    ValidationError,
    normalize_phone,
)
from contactbook.infrastructure import InMemoryContactRepository

__all__ = [
    "ConflictError",
    "Contact",
    "ContactChanges",
    "ContactError",
    "ContactRepository",
    "ContactService",
    "InMemoryContactRepository",
    "NewContact",
    "NotFoundError",
    "ValidationError",
    "normalize_phone",
]
