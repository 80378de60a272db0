# ==============================================
# AddressBook — Final Orchestrator
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties the topics together. Front ends
#   (the CLI, a form window) talk to this class only. Everything else
#   is internal.
#
# HOW IT CONNECTS THE TOPICS:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                      AddressBook                         │
#   │                                                          │
#   │   raw form fields ──► trim_field ──► Contact             │
#   │                                        │                 │
#   │  ┌─────────────────────────────────────▼────────┐        │
#   │  │ TOPIC 2 + 3: VALIDATION → STORAGE            │        │
#   │  │  validate_contact → RecordStore              │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ save / load                            │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ PERSISTENCE                                  │        │
#   │  │  RecordSerializer ⇄ ModExpCodec ⇄ file       │        │
#   │  └──────────────────────────────────────────────┘        │
#   └──────────────────────────────────────────────────────────┘
#
#
# CLASS: AddressBook
# ------------------
#
#   Constructor:
#   ------------
#   - __init__(config: AppConfig | None = None, store: RecordStore | None = None)
#       1. Load config (from .env or passed in)
#       2. Create the RecordStore (or use the one given)
#       3. Create ModExpCodec, RecordSerializer, PersistenceService
#
#   Public Methods (User-facing API):
#   ---------------------------------
#   - add_contact(name, phone, email, date) -> Contact
#   - edit_contact(index, name, phone, email, date) -> Contact
#   - submit(mode: EditMode, name, phone, email, date) -> Contact
#   - delete_contact(index) -> Contact
#   - search(query) -> list[Contact]
#   - search_indexed(query) -> list[(index, Contact)]
#   - sort(field) -> None
#   - contacts() -> list[Contact]
#   - save(path, allow_empty) -> int
#   - load(path) -> LoadResult
#   - get_status() -> dict
#
# ==============================================

from pathlib import Path
from typing import List, Optional, Tuple, Union

from contactbook.config import AppConfig, get_config
from contactbook.codec.mod_exp import ModExpCodec
from contactbook.errors import ContactBookError
from contactbook.persistence.contact_file import LoadOutcome, LoadResult, PersistenceService
from contactbook.records.contact import Contact, EditMode, SortField
from contactbook.serialization.serializer import RecordSerializer
from contactbook.storage.record_store import RecordStore
from contactbook.validation.validators import trim_field


class AddressBook:
    """
    Application context for the contact book:
    1. Form input trimming
    2. Validation and storage
    3. Encoded file persistence
    """

    def __init__(self, config: Optional[AppConfig] = None, store: Optional[RecordStore] = None):
        """
        Initialize the address book with all components.

        Args:
            config: Application configuration. If None, loads from environment.
            store: Existing store to manage. If None, an empty one is created.
        """
        self._config = config or get_config()

        self._store = store if store is not None else RecordStore(self._config.store.capacity)

        self._codec = ModExpCodec(
            n=self._config.codec.n,
            e=self._config.codec.e,
            d=self._config.codec.d
        )
        self._serializer = RecordSerializer(
            max_bytes=self._config.persistence.max_buffer_bytes
        )
        self._persistence = PersistenceService(self._codec, self._serializer)

        self._data_file = Path(self._config.persistence.data_file)

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def data_file(self) -> Path:
        return self._data_file

    def add_contact(self, name: str, phone: str = "", email: str = "", date: str = "") -> Contact:
        """
        Add a contact from raw form input.

        Args:
            name, phone, email, date: Field text as typed by the user

        Returns:
            The stored contact

        Raises:
            ValidationFailed, CapacityExceeded
        """
        return self.submit(EditMode.adding(), name, phone, email, date)

    def edit_contact(self, index: int, name: str, phone: str = "", email: str = "", date: str = "") -> Contact:
        """
        Replace the contact at index with new form input.

        Raises:
            ValidationFailed, IndexOutOfRange
        """
        return self.submit(EditMode.editing_at(index), name, phone, email, date)

    def submit(self, mode: EditMode, name: str, phone: str = "", email: str = "", date: str = "") -> Contact:
        """
        Apply a form submission in add or edit mode.

        Args:
            mode: EditMode.adding() or EditMode.editing_at(index)
            name, phone, email, date: Raw field text

        Returns:
            The stored contact
        """
        contact = Contact(
            name=trim_field(name),
            phone=trim_field(phone),
            email=trim_field(email),
            date=trim_field(date)
        )

        try:
            if mode.is_adding:
                self._store.add(contact)
                print(f"✓ Added contact {contact.name!r} ({len(self._store)}/{self._store.capacity})")
            else:
                self._store.update(mode.index, contact)
                print(f"✓ Updated contact {mode.index}: {contact.name!r}")
        except ContactBookError as e:
            print(f"✗ {e}")
            raise

        return contact

    def delete_contact(self, index: int) -> Contact:
        """
        Delete the contact at index; later contacts shift down by one.

        Raises:
            IndexOutOfRange
        """
        try:
            removed = self._store.delete(index)
        except ContactBookError as e:
            print(f"✗ {e}")
            raise

        print(f"✓ Deleted contact {removed.name!r}")
        return removed

    def search(self, query: Optional[str] = None) -> List[Contact]:
        return self._store.filter_by_name_substring(query)

    def search_indexed(self, query: Optional[str] = None) -> List[Tuple[int, Contact]]:
        """Search, keeping each match's store index for edit/delete."""
        return self._store.indexed_by_name_substring(query)

    def sort(self, field: Union[SortField, str] = SortField.NAME) -> None:
        field = SortField(field)
        if len(self._store) < 2:
            print("⚠ Not enough contacts to sort")
            return
        self._store.sort_by(field)

    def contacts(self) -> List[Contact]:
        return self._store.contacts()

    def save(self, path: Optional[Union[str, Path]] = None, allow_empty: bool = False) -> int:
        """
        Save the store to the encoded contact file.

        An empty store is not written unless allow_empty is set, so an
        existing file is not overwritten with nothing by accident.

        Args:
            path: Destination. Defaults to the configured data file.
            allow_empty: Write an empty file when the store is empty.

        Returns:
            Number of contacts written (0 when the store is empty)

        Raises:
            SerializationError, PersistenceError
        """
        target = Path(path) if path is not None else self._data_file

        if len(self._store) == 0 and not allow_empty:
            print("⚠ No contacts to save")
            return 0

        try:
            encoded = self._persistence.save(self._store.contacts(), target)
        except ContactBookError as e:
            print(f"✗ Save failed: {e}")
            raise

        print(f"✓ Saved {len(self._store)} contacts to {target} ({encoded} bytes encoded)")
        return len(self._store)

    def load(self, path: Optional[Union[str, Path]] = None) -> LoadResult:
        """
        Load the encoded contact file into the store.

        The store is replaced only when at least one contact was read.
        A missing file or a file without valid contacts leaves it as is.

        Args:
            path: Source. Defaults to the configured data file.

        Returns:
            LoadResult describing what happened

        Raises:
            PersistenceError: if the file exists but cannot be read
        """
        source = Path(path) if path is not None else self._data_file

        try:
            result = self._persistence.load_into(self._store, source)
        except ContactBookError as e:
            print(f"✗ Load failed: {e}")
            raise

        if result.outcome is LoadOutcome.NOT_FOUND:
            print(f"⚠ No contact file found at {source}")
        elif result.outcome is LoadOutcome.NO_VALID_RECORDS:
            print(f"⚠ No valid contacts in {source}, keeping current list")
        else:
            print(f"✓ Loaded {result.accepted - result.rejected} contacts from {source}")
            if result.rejected:
                print(f"⚠ Too many contacts: {result.rejected} did not fit "
                      f"(capacity {self._store.capacity})")

        return result

    def get_status(self) -> dict:
        """
        Get current address book status.

        Returns:
            Dictionary with store and file information.
        """
        return {
            "contacts": len(self._store),
            "capacity": self._store.capacity,
            "is_full": self._store.is_full,
            "data_file": str(self._data_file),
            "data_file_exists": self._data_file.exists(),
        }

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        return False  # Don't suppress exceptions
