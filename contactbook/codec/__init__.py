# ==============================================
# TOPIC 4: CODEC
# ==============================================
#
# Per-byte modular exponentiation used to encode the contact file.
# The constants are tiny and published in this repository, so this
# is a file format, not encryption.
#
# Modules:
# --------
# - mod_exp.py  → modexp(), ModExpCodec
#
# ==============================================

from .mod_exp import ModExpCodec, modexp

__all__ = ["ModExpCodec", "modexp"]
