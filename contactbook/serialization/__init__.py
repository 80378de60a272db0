# ==============================================
# TOPIC 5: SERIALIZATION
# ==============================================
#
# Converts contacts to the delimited text format and back.
#
#   name|phone|email|date\n   (one line per contact, no escaping)
#
# Modules:
# --------
# - serializer.py  → RecordSerializer, ParseResult
#
# ==============================================

from .serializer import RecordSerializer, ParseResult

__all__ = ["RecordSerializer", "ParseResult"]
