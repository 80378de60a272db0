# ==============================================
# RecordSerializer
# ==============================================
#
# PURPOSE:
#   Convert the full list of contacts into the delimited text
#   buffer that gets encoded to disk, and parse such a buffer back
#   into contacts.
#
# FORMAT:
# -------
#   name|phone|email|date\n
#
#   One line per contact in store order. Fields are written verbatim;
#   there is no escaping, so a field may never contain '|' or '\n'.
#   A '\r' is written as-is: files saved with CRLF line ends load with
#   it at the end of the date field and must save again unchanged.
#
# PARSING POLICY (lenient):
# -------------------------
#   - Lines are split on '|'; only the first four pieces are used.
#   - Missing trailing fields become empty strings.
#   - A line whose name is empty is skipped without reporting it.
#   - Every field is truncated to the Contact length limits.
#   - Parsing never raises.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Iterable, List

from contactbook.errors import SerializationError
from contactbook.records.contact import Contact


FIELD_DELIMITER = "|"
LINE_TERMINATOR = "\n"
DEFAULT_MAX_BYTES = 100_000


@dataclass
class ParseResult:
    contacts: List[Contact] = field(default_factory=list)
    accepted: int = 0
    skipped_lines: int = 0


class RecordSerializer:
    """
    Text serializer for contacts.

    One byte of the buffer is reserved for the terminator older writers
    appended, so a serialized store must stay strictly below max_bytes.
    """

    def __init__(self, max_bytes: int = DEFAULT_MAX_BYTES, encoding: str = "utf-8"):
        if max_bytes <= 0:
            raise ValueError(f"max_bytes must be positive, got {max_bytes}")
        self.max_bytes = max_bytes
        self.encoding = encoding

    def serialize(self, contacts: Iterable[Contact]) -> bytes:
        """
        Serialize contacts in order.

        Args:
            contacts: Contacts to write

        Returns:
            The complete buffer

        Raises:
            SerializationError: if a field contains '|' or '\\n', cannot
                be encoded, or the buffer would reach max_bytes. Nothing
                is returned in that case.
        """
        chunks: List[bytes] = []
        total = 0

        for position, contact in enumerate(contacts):
            values = contact.fields()
            for value in values:
                if FIELD_DELIMITER in value or LINE_TERMINATOR in value:
                    raise SerializationError(
                        f"Contact {position} ({contact.name!r}) contains a field delimiter"
                    )

            try:
                line = (FIELD_DELIMITER.join(values) + LINE_TERMINATOR).encode(self.encoding)
            except UnicodeEncodeError as e:
                raise SerializationError(
                    f"Contact {position} ({contact.name!r}) cannot be encoded as {self.encoding}: {e.reason}"
                ) from e

            if total + len(line) >= self.max_bytes:
                raise SerializationError(
                    f"Contact data too large to save (limit {self.max_bytes - 1} bytes)"
                )
            chunks.append(line)
            total += len(line)

        return b"".join(chunks)

    def parse(self, data: bytes) -> ParseResult:
        """
        Parse a buffer produced by serialize(), skipping malformed lines.

        Args:
            data: Raw decoded buffer

        Returns:
            ParseResult with the accepted contacts and their count
        """
        result = ParseResult()
        text = data.decode(self.encoding, errors="replace")

        for line in text.split(LINE_TERMINATOR):
            if not line:
                continue

            parts = line.split(FIELD_DELIMITER)[:4]
            parts += [""] * (4 - len(parts))
            name, phone, email, date = parts

            if not name:
                result.skipped_lines += 1
                continue

            result.contacts.append(Contact(name=name, phone=phone, email=email, date=date))

        result.accepted = len(result.contacts)
        return result
