# ==============================================
# Contact Book
# ==============================================
#
# Package Structure (5 Topics + Orchestrator):
#
# contactbook/
# ├── records/          # Topic 1: Contact record type and edit modes
# ├── validation/       # Topic 2: Field validation rules
# ├── storage/          # Topic 3: Bounded in-memory record store
# ├── codec/            # Topic 4: Per-byte modular exponentiation codec
# ├── serialization/    # Topic 5: Delimited text format for records
# ├── persistence/      # Save/load the store to a single encoded file
# ├── config.py         # Configuration management
# ├── errors.py         # Error kinds shared by every topic
# ├── address_book.py   # Final orchestrator class
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
