"""Command line entry point: reflect a ``.spv`` file and print it as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .errors import SpirvError
from .loader import load_module
from .serde import to_json


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="spirv-layout",
        description="Reflect the resource interface of a SPIR-V binary",
    )
    parser.add_argument("path", type=str, help="Compiled SPIR-V module (.spv)")
    parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation (default: 2)"
    )
    parser.add_argument(
        "--entry", type=str, help="Only report the entry point with this name"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        module = load_module(args.path, config=load_config())
    except OSError as exc:
        print(f"spirv-layout: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1
    except SpirvError as exc:
        print(
            f"spirv-layout: {args.path}: {type(exc).__name__}: {exc}", file=sys.stderr
        )
        return 1

    print(to_json(module, indent=args.indent, entry=args.entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())
