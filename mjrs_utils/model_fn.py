"""Method wrappers for C functions that take a given MuJoCo struct."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from pathlib import Path

from mjrs_utils.casing import (
    escape_doc_comment,
    return_annotation,
    rust_type,
    to_pascal_case,
    to_snake_case,
)

_STRIP_PREFIXES = ("mj_", "mjv_", "mjr_", "mjd_", "mju_")
_ASCII_WHITESPACE = re.compile(r"[ \t\n\r\x0c]+")


def _split_words(text: str) -> list[str]:
    return [part for part in _ASCII_WHITESPACE.split(text) if part]


def _method_name(fn_name: str) -> str:
    name = fn_name
    for prefix in _STRIP_PREFIXES:
        while name.startswith(prefix):
            name = name[len(prefix):]
    return to_snake_case(name)


def process_arguments(
    param_string: str, self_name: str, blacklist: Sequence[str]
) -> tuple[list[str], list[str]] | None:
    """Build the method's parameters and call arguments, or None to skip it."""
    if any(entry in param_string for entry in blacklist):
        return None

    params: list[str] = []
    call_args: list[str] = []
    for parameter in param_string.split(","):
        parts = _split_words(parameter)
        if not parts:
            raise ValueError(f"empty parameter declaration in {param_string!r}")

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
            if param_type.startswith("void"):
                return None
            params.append(f"{name}: {mutability}[{rust_type(param_type)}; {length}]")
        elif parts[0] == "const" and parts[1].startswith(self_name):
            call_args.append("self.ffi()")
            params.insert(0, "&self")
        elif parts[0].startswith(self_name):
            call_args.append("self.ffi_mut()")
            params.insert(0, "&mut self")
        else:
            if parts[0] == "const":
                param_type, mutability = parts[1], "&"
            else:
                param_type, mutability = parts[0], "&mut "
            raw_name = parts[-1]
            is_pointer = param_type.endswith("*") or raw_name.startswith("*")
            if param_type.startswith("mj"):
                type_string = to_pascal_case(param_type)
            else:
                type_string = rust_type(param_type.rstrip("*"))
            if is_pointer:
                type_string = mutability + type_string
            name = to_snake_case(raw_name)
            params.append(f"{name}: {type_string}")
            call_args.append(name)
    return params, call_args


def iter_mj_self_methods(
    header_text: str, self_name: str, blacklist: Sequence[str]
) -> Iterator[str]:
    """Yield a Rust method for each header function taking ``self_name``."""
    pattern = re.compile(
        r"(?s)((?://[^\r\n]*?\r?\n)+?)\s*MJAPI\s+((?:const\s+)?[\w*]+)\s+(\w+)\s*\(([^)]*?"
        + self_name
        + r"[^)]*?)\)\s*;"
    )
    for match in pattern.finditer(header_text):
        docstring, return_type, fn_name, param_string = match.groups()
        processed = process_arguments(param_string, self_name, blacklist)
        if processed is None:
            continue
        params, call_args = processed
        yield (
            f"\n{escape_doc_comment(docstring)}\n"
            f"pub fn {_method_name(fn_name)}({', '.join(params)}){return_annotation(return_type)} {{\n"
            f"    unsafe {{ {fn_name}({', '.join(call_args)}) }}\n"
            f"}}"
        )


def create_mj_self_methods(
    path: str | Path, self_name: str, blacklist: Sequence[str]
) -> None:
    """Print the methods generated from the header file at the given path."""
    header_text = Path(path).read_text()
    for method in iter_mj_self_methods(header_text, self_name, blacklist):
        print(method)