import struct
from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from contactbook.codec.mod_exp import ModExpCodec
from contactbook.errors import PersistenceError
from contactbook.records.contact import Contact
from contactbook.serialization.serializer import RecordSerializer
from contactbook.storage.record_store import RecordStore


# ==============================================
# PersistenceService
# ==============================================
#
# PURPOSE:
#   Save the contact list to a single file and load it back.
#
#   save:  contacts → RecordSerializer.serialize → bytes
#                   → ModExpCodec.encode_byte (per byte) → int32 stream → file
#
#   load:  file → int32 stream → ModExpCodec.decode_integer (per int)
#               → bytes → RecordSerializer.parse → contacts
#
# FILE FORMAT:
# ------------
#   No header. A flat sequence of little-endian signed 32-bit
#   integers, one per byte of the serialized text. A trailing
#   fragment shorter than 4 bytes is ignored.
#
# ==============================================

INT_FORMAT = "<i"
INT_WIDTH = struct.calcsize(INT_FORMAT)


class LoadOutcome(Enum):
    """
    Result of a load attempt.

    - LOADED: at least one contact was parsed
    - NOT_FOUND: the file does not exist, nothing to load
    - NO_VALID_RECORDS: the file decoded but held no usable contact
    """
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    NO_VALID_RECORDS = "no_valid_records"


@dataclass
class LoadResult:
    outcome: LoadOutcome
    contacts: List[Contact] = field(default_factory=list)
    accepted: int = 0
    rejected: int = 0  # Contacts that did not fit the store's capacity
    skipped_lines: int = 0

    @property
    def loaded(self) -> bool:
        return self.outcome is LoadOutcome.LOADED


# CLASS: PersistenceService
# -------------------------
#   Stateless apart from the codec and serializer it is given.
#
#   Constructor:
#   ------------
#   - __init__(codec: ModExpCodec | None, serializer: RecordSerializer | None)
#
class PersistenceService:
    """
    Reads and writes encoded contact files.

    The encoding is a fixed toy transform kept for compatibility with
    existing files. It offers no confidentiality.
    """

    def __init__(self, codec: ModExpCodec = None, serializer: RecordSerializer = None):
        self.codec = codec or ModExpCodec()
        self.serializer = serializer or RecordSerializer()

#   Methods:
#   --------
#   - save(contacts, path) -> int
#       Serialize, encode every byte, write the integers. Returns the
#       number of bytes encoded.
#
#   - load(path) -> LoadResult
#       Read, decode, parse. Never touches a store.
#
#   - load_into(store, path) -> LoadResult
#       load(), then replace the store's contents only if at least
#       one contact was accepted.
#
    def save(self, contacts: Iterable[Contact], path: Union[str, Path]) -> int:
        """
        Save contacts to an encoded file.

        The text buffer is built before the file is opened, so a store
        that is too large to serialize never truncates an existing file.
        A write error part way through may leave a partial file.

        Args:
            contacts: Contacts to save, in order
            path: Destination file

        Returns:
            Number of bytes encoded (one integer each)

        Raises:
            SerializationError: if the contacts exceed the buffer limit
            PersistenceError: if the file cannot be written
        """
        buffer = self.serializer.serialize(contacts)
        encoded = self.codec.encode_bytes(buffer)
        payload = b"".join(struct.pack(INT_FORMAT, value) for value in encoded)

        path = Path(path)
        try:
            with open(path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise PersistenceError(f"Failed to write {path}: {e}") from e

        return len(buffer)

    def load(self, path: Union[str, Path]) -> LoadResult:
        """
        Load contacts from an encoded file.

        Args:
            path: Source file

        Returns:
            LoadResult. NOT_FOUND if the file is missing,
            NO_VALID_RECORDS if nothing parsed, LOADED otherwise.

        Raises:
            PersistenceError: if the file cannot be read, or it decodes
                to more data than the serializer's buffer limit
        """
        path = Path(path)
        if not path.exists():
            return LoadResult(outcome=LoadOutcome.NOT_FOUND)

        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise PersistenceError(f"Failed to read {path}: {e}") from e

        usable = len(raw) - (len(raw) % INT_WIDTH)
        if usable // INT_WIDTH >= self.serializer.max_bytes:
            raise PersistenceError(
                f"Buffer overflow while loading {path} "
                f"(more than {self.serializer.max_bytes - 1} bytes)"
            )

        values = (value for (value,) in struct.iter_unpack(INT_FORMAT, raw[:usable]))
        buffer = self.codec.decode_integers(values)
        parsed = self.serializer.parse(buffer)

        if parsed.accepted == 0:
            return LoadResult(
                outcome=LoadOutcome.NO_VALID_RECORDS,
                skipped_lines=parsed.skipped_lines
            )

        return LoadResult(
            outcome=LoadOutcome.LOADED,
            contacts=parsed.contacts,
            accepted=parsed.accepted,
            skipped_lines=parsed.skipped_lines
        )

    def load_into(self, store: RecordStore, path: Union[str, Path]) -> LoadResult:
        """
        Load a file and, if it held any contacts, replace the store.

        Args:
            store: Store to replace
            path: Source file

        Returns:
            LoadResult with `rejected` set to the number of contacts that
            did not fit the store's capacity
        """
        result = self.load(path)
        if result.loaded:
            result.rejected = store.replace_all(result.contacts)
        return result

# FILE STRUCTURE:
# ---------------
#   contacts.enc
#   └── int32 LE × N  → encode_byte(b) for each byte b of
#                       "name|phone|email|date\n" × contacts
#
# =============================================
