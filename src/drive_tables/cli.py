"""CLI for drive-tables - table access to Drive files.

Usage:
    drive-tables get-table csv <file_id>                      # Show inferred schema
    drive-tables get-data spreadsheet <file_id> <sheet>       # Print rows as JSON
    drive-tables add-row json <file_id> --row '{"id": 3}'     # Append a row
    drive-tables update-row csv <file_id> --key '{"id": "1"}' --row '{"email": "a@x.com"}'
    drive-tables delete-row spreadsheet <file_id> <sheet> --key '{"id": "2"}'

Credentials are read from --credentials or the DRIVE_TABLES_CREDENTIALS
environment variable (service account key or authorized user file).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from dataclasses import asdict
from typing import Any

from googleapiclient.errors import HttpError

from drive_tables.config import CREDENTIALS_ENV_VAR
from drive_tables.connector import TableConnector
from drive_tables.google import GoogleAuthError, GoogleClients, load_credentials
from drive_tables.handlers.exceptions import InvalidInputError
from drive_tables.handlers.models import InferredTable, Table

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_INPUT = 2


def _build_connector(credentials_path: str) -> TableConnector:
    """Create a connector from a credentials file."""
    credentials = load_credentials(credentials_path)
    return TableConnector(GoogleClients.from_credentials(credentials))


def _parse_object(value: str | None, option: str) -> dict[str, Any]:
    """Parse a JSON object passed on the command line."""
    if value is None:
        raise InvalidInputError(f"{option} is required")
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"{option} is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise InvalidInputError(f"{option} must be a JSON object")
    return parsed


def _schema_to_dict(inferred: InferredTable) -> dict[str, Any]:
    return {
        "name": inferred.name,
        "path": inferred.path,
        "fields": [
            {"name": f.name, "type": f.type.value, "is_key": f.is_key} for f in inferred.fields
        ],
    }


async def _load_table(connector: TableConnector, path: list[str]) -> Table:
    return (await connector.get_table(path)).to_table()


async def cmd_get_table(connector: TableConnector, path: list[str]) -> int:
    """Print the inferred schema of a file."""
    inferred = await connector.get_table(path)
    print(json.dumps(_schema_to_dict(inferred), indent=2))
    return EXIT_OK


async def cmd_get_data(connector: TableConnector, path: list[str]) -> int:
    """Print all rows of a file."""
    table = await _load_table(connector, path)
    result = await connector.get_data(table)
    print(json.dumps(result.rows, indent=2, ensure_ascii=False, default=str))
    for warning in result.warnings:
        print(f"Warning: {json.dumps(asdict(warning))}", file=sys.stderr)
    return EXIT_OK


async def cmd_add_row(connector: TableConnector, path: list[str], row: dict[str, Any]) -> int:
    """Append a row."""
    table = await _load_table(connector, path)
    await connector.add_row(table, row)
    print("Row added")
    return EXIT_OK


async def cmd_update_row(
    connector: TableConnector, path: list[str], key: dict[str, Any], row: dict[str, Any]
) -> int:
    """Update the first row matching a key."""
    table = await _load_table(connector, path)
    await connector.update_row(table, key, row)
    print("Update applied")
    return EXIT_OK


async def cmd_delete_row(connector: TableConnector, path: list[str], key: dict[str, Any]) -> int:
    """Delete the first row matching a key."""
    table = await _load_table(connector, path)
    await connector.delete_row(table, key)
    print("Delete applied")
    return EXIT_OK


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("type", help="Resource type: spreadsheet, csv, tsv or json")
    parser.add_argument("file_id", help="Drive file or spreadsheet ID")
    parser.add_argument("sheet", nargs="?", help="Sheet name (spreadsheets only)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="drive-tables",
        description="Read and write Drive spreadsheets, CSV/TSV and JSON files as tables",
    )
    parser.add_argument(
        "--credentials",
        type=str,
        default=None,
        help=f"Service account key or authorized user file (default: ${CREDENTIALS_ENV_VAR})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # get-table command
    get_table_parser = subparsers.add_parser("get-table", help="Show the inferred schema")
    _add_path_arguments(get_table_parser)

    # get-data command
    get_data_parser = subparsers.add_parser("get-data", help="Print rows as JSON")
    _add_path_arguments(get_data_parser)

    # add-row command
    add_parser = subparsers.add_parser("add-row", help="Append a row")
    _add_path_arguments(add_parser)
    add_parser.add_argument("--row", type=str, help="Row as a JSON object")

    # update-row command
    update_parser = subparsers.add_parser("update-row", help="Update the row matching a key")
    _add_path_arguments(update_parser)
    update_parser.add_argument("--key", type=str, help="Key as a JSON object")
    update_parser.add_argument("--row", type=str, help="Values to merge as a JSON object")

    # delete-row command
    delete_parser = subparsers.add_parser("delete-row", help="Delete the row matching a key")
    _add_path_arguments(delete_parser)
    delete_parser.add_argument("--key", type=str, help="Key as a JSON object")

    return parser


async def _run(args: argparse.Namespace, connector: TableConnector) -> int:
    path = [args.type, args.file_id] + ([args.sheet] if args.sheet else [])

    if args.command == "get-table":
        return await cmd_get_table(connector, path)
    if args.command == "get-data":
        return await cmd_get_data(connector, path)
    if args.command == "add-row":
        return await cmd_add_row(connector, path, _parse_object(args.row, "--row"))
    if args.command == "update-row":
        key = _parse_object(args.key, "--key")
        return await cmd_update_row(connector, path, key, _parse_object(args.row, "--row"))
    if args.command == "delete-row":
        return await cmd_delete_row(connector, path, _parse_object(args.key, "--key"))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    credentials_path = args.credentials or os.environ.get(CREDENTIALS_ENV_VAR)
    if not credentials_path:
        print(
            f"Error: no credentials. Pass --credentials or set {CREDENTIALS_ENV_VAR}",
            file=sys.stderr,
        )
        return EXIT_ERROR

    try:
        connector = _build_connector(credentials_path)
        return asyncio.run(_run(args, connector))
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except (GoogleAuthError, HttpError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
