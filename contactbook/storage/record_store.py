# ==============================================
# RecordStore
# ==============================================
#
# PURPOSE:
#   Hold the address book in memory as an ordered, bounded list of
#   Contact records, and expose the mutations and queries the UI
#   collaborator needs.
#
# RULES:
# ------
#   1. Insertion order is kept until sort_by() is called.
#   2. Length never exceeds capacity (default 1000).
#   3. Every index below length holds a Contact. Deleting compacts the
#      list by shifting later records down one slot; there are no
#      tombstones.
#   4. A rejected mutation leaves the store untouched.
#
# CLASS: RecordStore
# ------------------
#   Stateful — owns the list of contacts.
#
#   Constructor:
#   ------------
#   - __init__(capacity: int = 1000)
#
# ==============================================

from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from contactbook.errors import CapacityExceeded, IndexOutOfRange
from contactbook.records.contact import Contact, SortField
from contactbook.validation.validators import validate_contact


DEFAULT_CAPACITY = 1000


def sort_key(field: Union[SortField, str]) -> Callable[[Contact], str]:
    """
    Key function for a case-insensitive sort on name or phone.

    Raises:
        ValueError: for any other field
    """
    sort_field = SortField(field) if isinstance(field, str) else field
    if not isinstance(sort_field, SortField):
        raise ValueError(f"Cannot sort by {field!r}")

    attribute = sort_field.value
    return lambda contact: getattr(contact, attribute).lower()


class RecordStore:
    """
    Ordered, capacity-bounded collection of contacts.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty store.

        Args:
            capacity: Maximum number of contacts the store may hold
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._records: List[Contact] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._records))

    def get(self, index: int) -> Contact:
        self._check_index(index)
        return self._records[index]

    def contacts(self) -> List[Contact]:
        """Return a copy of all contacts in store order."""
        return list(self._records)

#   Methods:
#   --------
#   MUTATION:
#   - add(contact) -> None
#       Append at the end. Raises CapacityExceeded when full.
#
#   - update(index, contact) -> None
#       Overwrite in place. Raises IndexOutOfRange.
#
#   - delete(index) -> Contact
#       Remove and compact. Raises IndexOutOfRange.
#
#   - replace_all(contacts) -> int
#       Swap everything at once (used by load). Returns how many
#       records did not fit.
#
#   add() and update() validate the contact first and raise
#   ValidationFailed before touching the store.
#
    def add(self, contact: Contact) -> None:
        """
        Append a contact at the end of the store.

        Args:
            contact: Contact to add

        Raises:
            ValidationFailed: if a field breaks a validation rule
            CapacityExceeded: if the store is already full
        """
        validate_contact(contact)
        if self.is_full:
            raise CapacityExceeded(self._capacity)
        self._records.append(contact)

    def update(self, index: int, contact: Contact) -> None:
        """
        Overwrite the contact at index.

        Raises:
            ValidationFailed: if a field breaks a validation rule
            IndexOutOfRange: if index is outside [0, length)
        """
        validate_contact(contact)
        self._check_index(index)
        self._records[index] = contact

    def delete(self, index: int) -> Contact:
        """
        Remove the contact at index. Every later contact moves one
        position earlier, so relative order is preserved.

        Returns:
            The removed contact

        Raises:
            IndexOutOfRange: if index is outside [0, length)
        """
        self._check_index(index)
        # O(n) shift, same as compacting a fixed array
        return self._records.pop(index)

    def replace_all(self, contacts: Iterable[Contact]) -> int:
        """
        Replace the whole store with the given contacts.

        Only the first `capacity` contacts are kept. The swap happens in
        one assignment, so a failure while collecting the input leaves
        the store as it was.

        Args:
            contacts: New contents, in order

        Returns:
            Number of contacts rejected because they did not fit
        """
        incoming = list(contacts)
        for contact in incoming:
            if not isinstance(contact, Contact):
                raise TypeError(f"replace_all() expects Contact items, got {type(contact).__name__}")

        rejected = max(0, len(incoming) - self._capacity)
        self._records = incoming[:self._capacity]
        return rejected

    def clear(self) -> None:
        self._records = []

#   QUERIES:
#   - filter_by_name_substring(query: str | None = None) -> list[Contact]
#       Case-sensitive substring match on name. Empty or None → all.
#
#   - indexed_by_name_substring(query) -> list[(index, Contact)]
#       Same match, each paired with its store index.
#
#   - sort_by(field: SortField | str) -> None
#       Stable, case-insensitive ascending sort on name or phone.
#
    def filter_by_name_substring(self, query: Optional[str] = None) -> List[Contact]:
        """
        Return contacts whose name contains query, in store order.

        Args:
            query: Substring to look for. None or "" returns every contact.

        Returns:
            New list; the store is not modified
        """
        return [contact for _, contact in self.indexed_by_name_substring(query)]

    def indexed_by_name_substring(self, query: Optional[str] = None) -> List[Tuple[int, Contact]]:
        """
        Like filter_by_name_substring(), but each match comes with its
        store index so the caller can pass it to update() or delete().
        """
        return [
            (index, contact)
            for index, contact in enumerate(self._records)
            if not query or query in contact.name
        ]

    def sort_by(self, field: Union[SortField, str]) -> None:
        """
        Sort the store in place, ascending and case-insensitively.

        Python's sort is stable, so contacts whose keys compare equal
        ("bob" and "Bob") keep their previous relative order.

        Args:
            field: SortField.NAME / SortField.PHONE, or "name" / "phone"

        Raises:
            ValueError: for any other field
        """
        self._records.sort(key=sort_key(field))

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if index < 0 or index >= len(self._records):
            raise IndexOutOfRange(index, len(self._records))
