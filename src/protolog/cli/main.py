"""Main CLI entry point for protolog."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..framing.header import HEADER_SIZE
from ..stream.config import ReaderConfig
from ..stream.scanner import Scanner
from ..utils.crc import crc32c


def dump_file(file_path: Path, config: ReaderConfig) -> int:
    """Print one line per record in a protolog file.

    Returns:
        Exit code (0 if the file ended cleanly, 1 on a decode error)
    """
    with open(file_path, "rb") as f:
        scanner = Scanner(f, config)
        index = 0
        print(f"{'#':>6}  {'offset':>12}  {'type':>5}  {'length':>10}  checksum")
        while scanner.scan():
            offset = scanner.offset - HEADER_SIZE - scanner.size
            payload = scanner.bytes()
            print(
                f"{index:>6}  {offset:>12}  {scanner.type_id():>5}  {len(payload):>10}  "
                f"0x{crc32c(payload):08x}"
            )
            index += 1

    error = scanner.error()
    if error is not None:
        print(f"Error at offset {scanner.offset}: {error}", file=sys.stderr)
        return 1
    return 0


def verify_file(file_path: Path, config: ReaderConfig) -> int:
    """Check every record in a protolog file.

    Returns:
        Exit code (0 if every record is intact, 1 otherwise)
    """
    with open(file_path, "rb") as f:
        scanner = Scanner(f, config)
        count = 0
        while scanner.scan():
            count += 1

    error = scanner.error()
    if error is not None:
        print(
            f"{file_path}: {count} good records, {scanner.offset} bytes, then error: {error}",
            file=sys.stderr,
        )
        return 1

    print(f"{file_path}: OK, {count} records, {scanner.offset} bytes")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the protolog CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="protolog",
        description="protolog: checksummed record log files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  protolog --dump events.log        List records (offset, type ID, length, checksum)
  protolog --verify events.log      Check every record's checksum
  protolog --version                Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="List the records in a protolog file",
    )
    group.add_argument(
        "--verify",
        metavar="FILE",
        type=str,
        help="Verify every record in a protolog file",
    )

    parser.add_argument(
        "--max-payload-size",
        metavar="BYTES",
        type=int,
        default=None,
        help="Reject records declaring a larger payload (guards against corrupt lengths)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"protolog {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    file_arg = args.dump or args.verify
    if file_arg is None:
        parser.print_help()
        return 0

    file_path = Path(file_arg)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.max_payload_size is None:
            config = ReaderConfig()
        else:
            config = ReaderConfig(max_payload_size=args.max_payload_size)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dump:
        return dump_file(file_path, config)
    return verify_file(file_path, config)


if __name__ == "__main__":
    sys.exit(main())
