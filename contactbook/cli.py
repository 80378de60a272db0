# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides command-line interface to the address book.
#   Every command loads the contact file, runs, and saves the file
#   again if it changed anything.
#
# COMMANDS:
# ---------
# 1. Show contacts (optionally filtered / sorted):
#    python -m contactbook.cli list
#    python -m contactbook.cli list --filter Ann --sort phone
#
# 2. Add / edit / delete:
#    python -m contactbook.cli add "Ann Lee" --phone +44123 --email ann@x.org
#    python -m contactbook.cli edit 0 "Ann Lee" --phone 555-1234
#    python -m contactbook.cli delete 0
#
# 3. Sort the stored order:
#    python -m contactbook.cli sort name
#
# 4. Show current status:
#    python -m contactbook.cli status
#
# All commands accept --file PATH to override CONTACTBOOK_DATA_FILE.
#
# ==============================================

import argparse
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

from contactbook.address_book import AddressBook
from contactbook.config import get_config
from contactbook.errors import ContactBookError
from contactbook.records.contact import Contact, SortField
from contactbook.storage.record_store import sort_key


SORT_CHOICES = [f.value for f in SortField]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contactbook",
        description="Manage a small address book stored in an encoded file."
    )
    parser.add_argument("--file", help="Contact file to use (default: CONTACTBOOK_DATA_FILE)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Show contacts")
    list_parser.add_argument("--filter", default=None, help="Only names containing this text")
    list_parser.add_argument("--sort", choices=SORT_CHOICES, default=None,
                             help="Order the listing (the file is not changed)")

    for command, help_text in (("add", "Add a contact"), ("edit", "Replace a contact")):
        sub = subparsers.add_parser(command, help=help_text)
        if command == "edit":
            sub.add_argument("index", type=int, help="Index shown by `list`")
        sub.add_argument("name")
        sub.add_argument("--phone", default="")
        sub.add_argument("--email", default="")
        sub.add_argument("--date", default="")

    delete_parser = subparsers.add_parser("delete", help="Delete a contact")
    delete_parser.add_argument("index", type=int, help="Index shown by `list`")

    sort_parser = subparsers.add_parser("sort", help="Sort the stored contacts")
    sort_parser.add_argument("field", choices=SORT_CHOICES)

    subparsers.add_parser("status", help="Show address book status")

    return parser


def format_table(rows: List[tuple]) -> str:
    header = ("#", "Name", "Phone", "Email", "Date")
    widths = [len(h) for h in header]
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(str(value)))

    lines = ["  ".join(str(v).ljust(widths[i]) for i, v in enumerate(header))]
    lines.append("  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  ".join(str(v).ljust(widths[i]) for i, v in enumerate(row)))
    return "\n".join(lines)


def print_contacts(entries: List[Tuple[int, Contact]]) -> None:
    """Print (store index, contact) pairs; the index is what edit/delete take."""
    if not entries:
        print("(no contacts)")
        return

    rows = [(index, c.name, c.phone, c.email, c.date) for index, c in entries]
    print(format_table(rows))


def run(args: argparse.Namespace) -> int:
    config = get_config()
    if args.file:
        config = replace(config, persistence=replace(config.persistence, data_file=args.file))

    book = AddressBook(config)
    book.load()

    if args.command == "list":
        entries = book.search_indexed(args.filter)
        if args.sort:
            key = sort_key(args.sort)
            entries = sorted(entries, key=lambda entry: key(entry[1]))
        print_contacts(entries)
        return 0

    if args.command == "status":
        for key, value in book.get_status().items():
            print(f"{key}: {value}")
        return 0

    if args.command == "add":
        book.add_contact(args.name, args.phone, args.email, args.date)
    elif args.command == "edit":
        book.edit_contact(args.index, args.name, args.phone, args.email, args.date)
    elif args.command == "delete":
        book.delete_contact(args.index)
    elif args.command == "sort":
        book.sort(args.field)

    book.save(allow_empty=True)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except ContactBookError:
        # AddressBook has already printed the reason
        return 1


if __name__ == "__main__":
    sys.exit(main())
