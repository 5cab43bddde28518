# Copyright 2026 BadCompany
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command line entry point.

    keysmith generate --key-file validator --key-type x25519 --encoding base64
    keysmith extract-public-key --key-file validator --key-type x25519 --encoding base64

Results are printed as JSON on stdout: ``{"Result": "Success"}`` or
``{"Error": "..."}`` with a non-zero exit code.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from . import __version__
from .config import KeysmithSettings, load_settings
from .exceptions import KeysmithError
from .generate import extract_public_key, generate_key
from .persistence import SaveKey
from .types import EncodingType, KeyType

_logger = logging.getLogger("keysmith.cli")

console = Console(highlight=False)


def _add_key_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--key-file",
        type=Path,
        required=True,
        help="Private key file. The public key goes to <key-file>.pub",
    )
    parser.add_argument(
        "--key-type",
        type=KeyType,
        choices=list(KeyType),
        default=None,
        help="Key type: ed25519 or x25519 (default from config: ed25519)",
    )
    parser.add_argument(
        "--encoding",
        type=EncodingType,
        choices=list(EncodingType),
        default=None,
        help="Encoding: hex, bcs or base64 (default from config: hex)",
    )
    parser.add_argument(
        "--assume-yes",
        action="store_true",
        default=None,
        help="Overwrite existing files without prompting",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keysmith",
        description="Generate and persist ed25519 and x25519 keys.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="YAML file with default settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate an ed25519 or x25519 key pair")
    _add_key_options(generate)

    extract = subparsers.add_parser(
        "extract-public-key", help="Write the public key of an existing private key"
    )
    _add_key_options(extract)
    extract.add_argument(
        "--output-file",
        type=Path,
        default=None,
        help="Public key output file (default: <key-file>.pub)",
    )
    return parser


def _configure_logging(settings: KeysmithSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _run(args: argparse.Namespace, settings: KeysmithSettings) -> None:
    key_type = args.key_type or settings.key_type
    encoding = args.encoding or settings.encoding
    assume_yes = settings.assume_yes if args.assume_yes is None else args.assume_yes

    if args.command == "generate":
        params = SaveKey(key_file=args.key_file, encoding=encoding, assume_yes=assume_yes)
        generate_key(key_type, params)
    elif args.command == "extract-public-key":
        extract_public_key(
            key_type,
            args.key_file,
            encoding,
            output_file=args.output_file,
            assume_yes=assume_yes,
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        _configure_logging(settings, args.verbose)
        _run(args, settings)
    except KeysmithError as e:
        _logger.debug(f"{args.command} failed", exc_info=True)
        console.print_json(json.dumps({"Error": str(e)}))
        return 1

    console.print_json(json.dumps({"Result": "Success"}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
