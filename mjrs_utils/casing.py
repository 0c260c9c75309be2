"""Identifier casing and type-name helpers for generated Rust code."""

from __future__ import annotations

_FFI_PREFIX = "std::ffi::c_"


def _ascii_lower(ch: str) -> str:
    return ch.lower() if ch.isascii() else ch


def _ascii_upper(ch: str) -> str:
    return ch.upper() if ch.isascii() else ch


def _trim_right(text: str) -> str:
    """Drop trailing characters that are not alphanumeric."""
    end = len(text)
    while end and not text[end - 1].isalnum():
        end -= 1
    return text[:end]


def _neighbour_is_lower(text: str, index: int) -> bool:
    following = text[index + 1] if index + 1 < len(text) else "A"
    preceding = text[index - 1] if index > 0 else "A"
    return following.islower() or preceding.islower()


def to_snake_case(text: str) -> str:
    """Convert an identifier such as ``mjModel`` or ``*res`` to snake_case."""
    result: list[str] = []
    at_word_start = True
    for index, ch in enumerate(_trim_right(text)):
        if not ch.isalnum():
            if not at_word_start:
                at_word_start = True
                result.append("_")
        elif not at_word_start and ch.isupper() and _neighbour_is_lower(text, index):
            at_word_start = False
            result.append("_")
            result.append(_ascii_lower(ch))
        else:
            at_word_start = False
            result.append(_ascii_lower(ch))
    return "".join(result)


def to_pascal_case(text: str) -> str:
    """Convert an identifier such as ``mjtNum`` to PascalCase."""
    result: list[str] = []
    new_word = True
    found_real_char = False
    last_char = " "
    for ch in _trim_right(text):
        if not ch.isalnum():
            if found_real_char:
                new_word = True
            continue
        found_real_char = True
        if new_word or (last_char.islower() and ch.isupper()):
            new_word = False
            result.append(_ascii_upper(ch))
        else:
            last_char = ch
            result.append(_ascii_lower(ch))
    return "".join(result)


def _rust_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def escape_doc_comment(comment: str) -> str:
    """Turn ``//`` comment lines into ``///`` doc lines with escaped brackets."""
    return "\n".join(
        line.replace("//", "///").replace("[", "\\[").replace("]", "\\]")
        for line in _rust_lines(comment)
    )


def rust_type(c_type: str) -> str:
    """Map a C type name to the Rust type used in generated signatures."""
    if c_type.startswith("mj"):
        return to_pascal_case(c_type)
    return f"{_FFI_PREFIX}{c_type}"


def return_annotation(return_type: str) -> str:
    """Return the ``-> T`` suffix for a C return type, empty for ``void``."""
    if return_type == "void":
        return ""
    return f" -> {rust_type(return_type)}"