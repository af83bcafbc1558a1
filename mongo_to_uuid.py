"""MongoDB BinData(3/4) <-> UUID converter."""

import argparse
import logging
import sys
from typing import List, Optional

from bindata.bson_interop import looks_like_literal, parse_literal, to_shell_literal
from bindata.codecs import encode_bindata
from bindata.constants import DEFAULT_SUBTYPE, LOG_LEVEL, SUPPORTED_SUBTYPES


logger = logging.getLogger(__name__)


def mongo_uuid_converter(input_str: str, subtype: str = DEFAULT_SUBTYPE, shell: bool = False) -> str:
    """Decode a BinData/Binary literal to a UUID, or encode a UUID as one."""
    if looks_like_literal(input_str):
        _subtype, uuid_str = parse_literal(input_str)
        return uuid_str

    if shell:
        return to_shell_literal(subtype, input_str)
    return encode_bindata(subtype, input_str)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert between UUID strings and MongoDB BinData(3/4) values."
    )
    parser.add_argument("value", help="UUID string, BinData(...) or Binary.createFromBase64(...) literal")
    parser.add_argument(
        "--subtype",
        choices=SUPPORTED_SUBTYPES,
        default=DEFAULT_SUBTYPE,
        help="subtype used when encoding a UUID (default: %(default)s)",
    )
    parser.add_argument(
        "--shell",
        action="store_true",
        help="encode as mongosh Binary.createFromBase64(...) instead of BinData(...)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))
    args = build_parser().parse_args(argv)

    try:
        result = mongo_uuid_converter(args.value, subtype=args.subtype, shell=args.shell)
    except ValueError as exc:
        logger.error(str(exc))
        return 1

    sys.stdout.write(f"{result}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
