# ==============================================
# Tests for Serialization Module
# ==============================================

import pytest

from contactbook.errors import SerializationError
from contactbook.records.contact import Contact
from contactbook.serialization.serializer import RecordSerializer


class TestSerialize:

    def test_line_format(self, serializer):
        data = serializer.serialize([Contact(name="Ann", phone="+44123", email="a@b.c", date="2024-01-15")])
        assert data == b"Ann|+44123|a@b.c|2024-01-15\n"

    def test_empty_fields_and_order(self, serializer):
        data = serializer.serialize([Contact(name="B"), Contact(name="A", email="x@y")])
        assert data == b"B|||\nA||x@y|\n"

    def test_empty_store(self, serializer):
        assert serializer.serialize([]) == b""

    def test_buffer_limit(self):
        # "Ann|||\n" is 7 bytes; two lines need 14 and the limit keeps one byte spare
        assert RecordSerializer(max_bytes=15).serialize([Contact(name="Ann")] * 2)
        with pytest.raises(SerializationError):
            RecordSerializer(max_bytes=14).serialize([Contact(name="Ann")] * 2)

    def test_delimiter_in_field(self, serializer):
        with pytest.raises(SerializationError):
            serializer.serialize([Contact(name="Ann|Lee")])

    def test_newline_in_field(self, serializer):
        with pytest.raises(SerializationError):
            serializer.serialize([Contact(name="Ann", email="a@b\nc")])

    def test_carriage_return_written_verbatim(self, serializer):
        contacts = [Contact(name="A\rB", date="2024\r")]
        data = serializer.serialize(contacts)
        assert data == b"A\rB|||2024\r\n"
        assert serializer.parse(data).contacts == contacts

    def test_unencodable_field(self, serializer):
        # Lone surrogate, as argv carries undecodable bytes
        with pytest.raises(SerializationError) as exc:
            serializer.serialize([Contact(name="Ann"), Contact(name="B\udcffob")])
        assert "Contact 1" in str(exc.value)
        assert isinstance(exc.value.__cause__, UnicodeEncodeError)


class TestParse:

    def test_round_trip(self, serializer, sample_contacts):
        result = serializer.parse(serializer.serialize(sample_contacts))
        assert result.contacts == sample_contacts
        assert result.accepted == 3

    def test_non_ascii_round_trip(self, serializer):
        contacts = [Contact(name="Zoë Ñúñez", email="zoë@exämple.com")]
        assert serializer.parse(serializer.serialize(contacts)).contacts == contacts

    def test_empty_name_line_skipped(self, serializer):
        result = serializer.parse(b"Ann|123|a@b|2024\n|555|x@y|2023\n")
        assert [c.name for c in result.contacts] == ["Ann"]
        assert result.accepted == 1
        assert result.skipped_lines == 1

    def test_missing_trailing_fields(self, serializer):
        result = serializer.parse(b"Ann|123\nBob\n")
        assert result.contacts == [Contact(name="Ann", phone="123"), Contact(name="Bob")]

    def test_extra_fields_ignored(self, serializer):
        result = serializer.parse(b"Ann|1|a@b|2024|extra|more\n")
        assert result.contacts == [Contact(name="Ann", phone="1", email="a@b", date="2024")]

    def test_missing_final_terminator(self, serializer):
        assert serializer.parse(b"Ann|1||").accepted == 1

    def test_blank_lines_ignored(self, serializer):
        assert serializer.parse(b"\n\nAnn\n\n").accepted == 1

    def test_fields_truncated(self, serializer):
        result = serializer.parse(("N" * 120 + "|" + "1" * 40 + "||2024-01-15-extra\n").encode())
        contact = result.contacts[0]
        assert len(contact.name) == 99
        assert len(contact.phone) == 29
        assert contact.date == "2024-01-15"

    def test_garbage_never_raises(self, serializer):
        result = serializer.parse(bytes(range(256)) * 3)
        assert result.accepted == len(result.contacts)

    def test_empty_buffer(self, serializer):
        result = serializer.parse(b"")
        assert result.contacts == []
        assert result.accepted == 0
