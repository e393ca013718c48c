"""In-memory implementation of ContactRepository (no DB). Contents are lost when the process ends."""

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in a list. Order preserved by insertion; lookups are linear scans."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def _index_of(self, contact_id: str) -> int | None:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return None

    def add(self, contact: Contact) -> None:
        if self._index_of(contact.id) is not None:
            raise ValueError(f"Contact id already stored: {contact.id}")
        self._contacts.append(contact)

    def get_by_id(self, contact_id: str) -> Contact | None:
        index = self._index_of(contact_id)
        if index is None:
            return None
        return self._contacts[index]

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def find_by_phone(self, phone: str) -> Contact | None:
        for contact in self._contacts:
            if contact.phone == phone:
                return contact
        return None

    def replace(self, contact: Contact) -> bool:
        index = self._index_of(contact.id)
        if index is None:
            return False
        self._contacts[index] = contact
        return True

    def remove(self, contact_id: str) -> bool:
        index = self._index_of(contact_id)
        if index is None:
            return False
        del self._contacts[index]
        return True

    def __len__(self) -> int:
        return len(self._contacts)
