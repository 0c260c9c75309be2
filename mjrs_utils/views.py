"""View-index code generation from the indexer X-macro header."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

_DEFINE_PATTERN = re.compile(
    r"#define MJ(?P<class>[A-z]+)_(?P<item>[A-z]+).*?\)$", re.DOTALL | re.MULTILINE
)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _strip_parentheses(item: str) -> str:
    _, found, rest = item.partition("(")
    if found:
        item = rest
    head, found, _ = item.partition(")")
    if found:
        item = head
    return item.strip()


def iter_view_lines(xmacro_text: str) -> Iterator[str]:
    """Yield the output lines for every X-macro define block in the text."""
    for match in _DEFINE_PATTERN.finditer(xmacro_text):
        yield f"{match.group('class').lower()}: {match.group('item')}"
        for line in _lines(match.group(0))[1:]:
            parts = [_strip_parentheses(item) for item in line.split(",")]
            if len(parts) != 5:
                continue
            _, _, suffix, ntotaldim, dim = parts
            if dim != "1":
                yield f"      let {suffix} = (id * {dim}, {dim});"
            else:
                yield (
                    f"      let {suffix} = mj_view_indices!(id, "
                    f"mj_model_nx_to_mapping!(model_ffi, {ntotaldim}), "
                    f"mj_model_nx_to_nitem!(model_ffi, {ntotaldim}), "
                    f"model_ffi.{ntotaldim});"
                )


def create_views(filepath: str | Path) -> None:
    """Print the view code generated from the X-macro header at the given path."""
    xmacro_text = Path(filepath).read_text()
    for line in iter_view_lines(xmacro_text):
        print(line)