"""
CLI entry point for bridgegen.

Usage:
    python3 -m tools.bridgegen                        # all targets -> generated/
    python3 -m tools.bridgegen --lang=ts,java --out=~/bridge
    python3 -m tools.bridgegen --all --root=path/to/project
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .emitter import emit
from .schema import BridgeGenError, load_protocol
from .targets import SUPPORTED_TARGETS, output_filename, parse_targets, resolve_out_dir


def generate(targets: List[str], out_dir: Path, protocol_path,
             bridge_name: str, verbose: bool = False) -> List[Path]:
    """Load the protocol once and write one file per target.

    Files are written independently; a failure part way through leaves the
    files already written in place.
    """
    spec = load_protocol(protocol_path)

    os.makedirs(out_dir, exist_ok=True)

    written = []
    for target in targets:
        path = Path(out_dir) / output_filename(target, bridge_name)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(emit(target, spec, bridge_name))
        if verbose:
            print(f"  wrote {path}")
        written.append(path)

    return written


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bridgegen",
        description="Generate bridge stubs from protocol.json",
    )
    parser.add_argument(
        "--lang",
        default=None,
        help=f"Comma-separated targets (default: all of {','.join(SUPPORTED_TARGETS)})",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Generate every supported target (same as omitting --lang)",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output directory, '~' and root-relative paths allowed (default: generated/)",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root holding protocol.json (default: current directory)",
    )
    parser.add_argument(
        "--protocol",
        default=None,
        help="Protocol file, relative to the project root (default: protocol.json)",
    )
    parser.add_argument(
        "--bridge-name",
        default=None,
        help="Name used for the interface, files and C symbols (default: JsBridge)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print each written file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    root = Path(args.root) if args.root else Path.cwd()

    try:
        config = load_config(root)

        lang = args.lang if args.lang is not None else config.lang
        targets = parse_targets(lang, args.all)
        out_dir = resolve_out_dir(args.out if args.out else config.out, root)
        protocol_path = root / (args.protocol or config.protocol)
        bridge_name = args.bridge_name or config.bridge_name

        generate(targets, out_dir, protocol_path, bridge_name, args.verbose)
    except (BridgeGenError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Generated ({','.join(targets)}) in: {out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
