"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Holds the contact registry. Implementations must preserve insertion order."""

    def add(self, contact: Contact) -> None:
        """Append a contact. The caller has already checked phone uniqueness."""
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order, as a new list."""
        ...

    def find_by_phone(self, phone: str) -> Contact | None:
        """Return the contact holding this normalized phone, or None."""
        ...

    def replace(self, contact: Contact) -> bool:
        """Swap in a new version of an existing contact, same position. False if id unknown."""
        ...

    def remove(self, contact_id: str) -> bool:
        """Delete one contact. Returns True if removed, False if not found."""
        ...
