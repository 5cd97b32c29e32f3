"""
Copyright 2025 DNAi inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from __future__ import annotations

"""
Command-line interface for zipconst (``zipconst``).

Supported commands (via ``python -m zipconst``):

- ``constants`` : Print signatures, header sizes, versions and methods
- ``codepage``  : Show the active code page and its Python codec
- ``decode``    : Decode hex bytes to text with a code page
- ``encode``    : Encode text to hex bytes with a code page
- ``scan``      : List ZIP signatures found in a file
- ``flags``     : Describe a general purpose bit flag value

Example usages:

    # Show where ZIP records start in a file
    python -m zipconst scan archive.zip

    # Decode an entry name stored in code page 850
    python -m zipconst --code-page 850 decode 63616682
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .codec import CodecConfig
from .constants import (
    COMPRESSION_METHODS,
    HEADER_SIZES,
    SIGNATURES,
    VERSIONS,
)
from .debug import describe_flags, hex_dump, scan_signatures
from .errors import ZipError
from .utils import pack_signature

logger = logging.getLogger("zipconst")


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration.

    Args:
        debug: Whether to enable debug logging.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        if debug
        else "%(message)s",
    )
    logger.setLevel(level)
    logger.debug("Debug logging enabled")


def _print_error(message: str, exit_code: int = 1) -> None:
    """Print an error message to stderr and exit with the given code."""
    sys.stderr.write(f"zipconst: {message}\n")
    sys.exit(exit_code)


def _cmd_constants(as_json: bool = False) -> None:
    """Print the format vocabulary as a table or as JSON."""
    methods = {name: int(method) for name, method in COMPRESSION_METHODS.items()}
    if as_json:
        print(
            json.dumps(
                {
                    "signatures": SIGNATURES,
                    "header_sizes": HEADER_SIZES,
                    "versions": VERSIONS,
                    "compression_methods": methods,
                },
                indent=2,
            )
        )
        return

    print("Signatures:")
    for name, value in SIGNATURES.items():
        raw = " ".join(f"{b:02X}" for b in pack_signature(value))
        print(f"  {name:<40} 0x{value:08X}  {raw}")
    print("Header sizes:")
    for name, value in HEADER_SIZES.items():
        print(f"  {name:<40} {value}")
    print("Versions:")
    for name, value in VERSIONS.items():
        print(f"  {name:<40} {value}")
    print("Compression methods:")
    for name, value in methods.items():
        print(f"  {name:<40} {value}")


def _cmd_codepage(config: CodecConfig) -> None:
    print(f"{config.code_page} ({config.encoding})")


def _cmd_decode(hex_data: str, config: CodecConfig) -> None:
    """Decode a hex string and print the text."""
    try:
        data = bytes.fromhex(hex_data)
    except ValueError:
        _print_error(f"Invalid hex string: {hex_data!r}", exit_code=2)
        return
    print(config.decode(data))


def _cmd_encode(text: str, config: CodecConfig) -> None:
    print(config.encode(text).hex())


def _cmd_scan(path: Path, dump: bool = False) -> None:
    """Print every signature occurrence in a file."""
    data = path.read_bytes()
    logger.debug("Scanning %d bytes of %s", len(data), path)
    matches = scan_signatures(data)
    for offset, names in matches:
        print(f"0x{offset:08X}  {' / '.join(names)}")
        if dump:
            print(hex_dump(data[offset : offset + 32], offset=offset))
    print(f"Found {len(matches)} signature(s)")


def _cmd_flags(value: str) -> None:
    try:
        flags = int(value, 0)
    except ValueError:
        _print_error(f"Invalid flag value: {value!r}", exit_code=2)
        return
    print(describe_flags(flags))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zipconst",
        description="zipconst - ZIP format constants and legacy text codec.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--code-page",
        type=int,
        metavar="N",
        default=None,
        help="Code page used by decode/encode and reported by codepage, "
             "without changing the process default. Defaults to $ZIPCONST_CODEPAGE "
             "or the host OEM code page.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_constants = subparsers.add_parser("constants", help="Print format constants")
    p_constants.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("codepage", help="Show the active code page")

    p_decode = subparsers.add_parser("decode", help="Decode hex bytes to text")
    p_decode.add_argument("hex", help="Bytes as a hex string, e.g. 63616682")

    p_encode = subparsers.add_parser("encode", help="Encode text to hex bytes")
    p_encode.add_argument("text", help="Text to encode")

    p_scan = subparsers.add_parser("scan", help="List ZIP signatures found in a file")
    p_scan.add_argument("file", type=Path, help="File to scan")
    p_scan.add_argument("--dump", action="store_true", help="Hex dump 32 bytes at each match")

    p_flags = subparsers.add_parser("flags", help="Describe general purpose bit flags")
    p_flags.add_argument("value", help="Flag value, decimal or 0x-prefixed hex")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the zipconst CLI.

    This function is invoked when running:

        python -m zipconst ...

    or via the ``zipconst`` console script.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    if args.code_page is not None:
        config = CodecConfig(args.code_page)
    else:
        config = CodecConfig.default()

    try:
        if args.command == "constants":
            _cmd_constants(as_json=args.json)
        elif args.command == "codepage":
            _cmd_codepage(config)
        elif args.command == "decode":
            _cmd_decode(args.hex, config)
        elif args.command == "encode":
            _cmd_encode(args.text, config)
        elif args.command == "scan":
            _cmd_scan(args.file, dump=args.dump)
        elif args.command == "flags":
            _cmd_flags(args.value)
    except ZipError as e:
        _print_error(str(e), exit_code=1)
    except FileNotFoundError as e:
        _print_error(f"File not found: {e.filename}", exit_code=2)
    except KeyboardInterrupt:
        _print_error("Interrupted by user", exit_code=130)


if __name__ == "__main__":
    main()
