"""Wrappers for C functions whose parameters are fixed-size arrays."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

from mjrs_utils.casing import escape_doc_comment, return_annotation, rust_type, to_snake_case

_FUNCTION_DECL = re.compile(
    r"(?s)((?://[^\r\n]*\r?\n)+)\s*MJAPI\s+((?:const)?\s*(?:[A-z0-9_*]+))\s+(\w+)\s*\((.+?)\)"
)
_ASCII_WHITESPACE = re.compile(r"[ \t\n\r\x0c]+")


def _split_words(text: str) -> list[str]:
    return [part for part in _ASCII_WHITESPACE.split(text) if part]


def _build_wrapper(match: re.Match[str]) -> str | None:
    comment, return_type, fn_name, param_string = match.groups()
    if return_type.endswith("*") or "*" in param_string:
        return None

    params: list[str] = []
    call_args: list[str] = []
    for parameter in param_string.split(","):
        parts = _split_words(parameter)
        if len(parts) < 2:
            return None

        last = parts[-1]
        if last.endswith("]"):
            bracket = last.index("[")
            length = last[bracket + 1 : -1]
            name = to_snake_case(last[:bracket])
            if parts[0] == "const":
                call_args.append(f"{name}.as_ptr()")
                mutability, param_type = "&", parts[1]
            else:
                call_args.append(f"{name}.as_mut_ptr()")
                mutability, param_type = "&mut ", parts[0]
            params.append(f"{name}: {mutability}[{rust_type(param_type)}; {length}]")
        else:
            name = to_snake_case(parts[1])
            params.append(f"{name}: {rust_type(parts[0])}")
            call_args.append(name)

    return (
        f"\n{escape_doc_comment(comment)}\n"
        f"pub fn {to_snake_case(fn_name)}({', '.join(params)}){return_annotation(return_type)}  {{\n"
        f"    unsafe {{ mujoco_c::{fn_name}({', '.join(call_args)}) }}\n"
        f"}}"
    )


def iter_fixed_array_fn_wrappers(header_text: str) -> Iterator[str]:
    """Yield the Rust wrapper for each pointer-free function in a header."""
    for match in _FUNCTION_DECL.finditer(header_text):
        wrapper = _build_wrapper(match)
        if wrapper is not None:
            yield wrapper


def create_fixed_array_fn_wrappers(mujoco_h_path: str | Path) -> None:
    """Print the wrappers generated from the header file at the given path."""
    header_text = Path(mujoco_h_path).read_text()
    for wrapper in iter_fixed_array_fn_wrappers(header_text):
        print(wrapper)