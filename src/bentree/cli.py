"""
Command-line entry point: bentree decode <bencoded-value>
"""
import logging
import os
import sys

from .decoder import decode_all
from .errors import BencodeDecodeError
from .limits import DecodeOptions
from .structure import render

logger = logging.getLogger(__name__)

USAGE = "Usage: bentree decode [--strict] [--max-depth=N] <bencoded-value>"


def _parse_flags(args):
    """Splits --flags from positional arguments and builds DecodeOptions."""
    overrides = {}
    positional = []
    for arg in args:
        if arg == "--strict":
            overrides["strict"] = True
        elif arg.startswith("--max-depth="):
            overrides["max_depth"] = int(arg.split("=", 1)[1])
        elif arg.startswith("--"):
            raise ValueError(f"unknown option: {arg}")
        else:
            positional.append(arg)
    return DecodeOptions(**overrides), positional


def cmd_decode(args) -> int:
    try:
        options, positional = _parse_flags(args)
    except ValueError as exc:
        print(exc)
        print(USAGE)
        return 2

    if len(positional) != 1:
        print(USAGE)
        return 2

    logger.debug("Decoding with %s", options)
    try:
        value = decode_all(os.fsencode(positional[0]), options=options)
    except BencodeDecodeError as exc:
        logger.error("Could not decode input: %s", exc)
        return 1

    print(render(value))
    return 0


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if not argv:
        print(USAGE)
        return 2

    command = argv[0]
    if command == "decode":
        return cmd_decode(argv[1:])

    print(f"unknown command: {command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
