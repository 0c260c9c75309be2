"""Command-line entry point for the development helpers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from mjrs_utils.fixed_arr_fn import create_fixed_array_fn_wrappers
from mjrs_utils.model_fn import create_mj_self_methods
from mjrs_utils.views import create_views

_VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its three sub-commands."""
    parser = argparse.ArgumentParser(
        prog="mujoco-rs-utils",
        description="A CLI utility to support some development of MuJoCo-rs.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    views = commands.add_parser(
        "create-views",
        help="Create calls to macros that build views into MjData/MjModel arrays.",
    )
    views.add_argument("indexer_xmacro_path", type=Path)

    fixed = commands.add_parser(
        "create-fixed-array-function-wrappers",
        help="Create wrappers around C functions with fixed-size array parameters.",
    )
    fixed.add_argument("mujoco_h_path", type=Path)

    methods = commands.add_parser(
        "create-model-methods",
        help="Create method wrappers for functions that belong to a struct.",
    )
    methods.add_argument("mujoco_h_path", type=Path, help="Path to the mujoco.h file.")
    methods.add_argument("struct_", metavar="STRUCT", help="The struct name to create method wrappers.")
    methods.add_argument(
        "blacklist",
        nargs="*",
        help="Ignore the methods that contain these types in the parameters.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named on the command line."""
    args = build_parser().parse_args(argv)
    if args.command == "create-views":
        create_views(args.indexer_xmacro_path)
    elif args.command == "create-fixed-array-function-wrappers":
        create_fixed_array_fn_wrappers(args.mujoco_h_path)
    else:
        create_mj_self_methods(args.mujoco_h_path, args.struct_, args.blacklist)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())