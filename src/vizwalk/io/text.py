"""
Helpers for the semi-structured text and CSV exports bundled with the walkthrough.

The files carry a title preamble, dashed rules under the header, blank lines, and
"Notes:"/"Source:" footers around the actual table. These helpers keep the header and the
contiguous block of data rows, then hand that block to polars.read_csv.

Notes
- Only the layouts of the bundled files are handled; this is not a general parser.
- Row recognition is delegated to a caller-supplied predicate.
"""

from __future__ import annotations

import io
import re
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import polars as pl

from .errors import IoParseError

_RULE_RE = re.compile(r"^[\s\-=|+_]+$")


def read_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read a text file into lines (no trailing newlines); FileNotFoundError if absent."""
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")
    # latin-1 never fails; fall back to it for exports with stray non-UTF-8 bytes.
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError:
        text = path.read_text(encoding="latin-1")
    return text.splitlines()


def is_rule(line: str) -> bool:
    """True for dashed/underlined separator lines."""
    stripped = line.strip()
    return bool(stripped) and bool(_RULE_RE.match(stripped))


def strip_preamble_and_footer(
    lines: Sequence[str], is_data_row: Callable[[str], bool]
) -> tuple[str, list[str]]:
    """
    Keep the header line and the first contiguous block of data rows.

    The header is the nearest non-blank, non-rule line above the first data row. The block
    ends at the first line that is neither a data row nor a rule (blank lines end it too).

    Args:
        lines (Sequence[str]): Raw file lines.
        is_data_row (Callable[[str], bool]): Predicate recognizing a data row.

    Returns:
        tuple[str, list[str]]: (header line, data rows).

    Raises:
        IoParseError: If no data rows or no header line can be found.

    Examples:
        >>> lines = ["Title", "", "a|b", "---", "1|2", "3|4", "", "Source: x"]
        >>> strip_preamble_and_footer(lines, lambda s: s[:1].isdigit())
        ('a|b', ['1|2', '3|4'])
    """
    first = next((i for i, line in enumerate(lines) if is_data_row(line)), None)
    if first is None:
        raise IoParseError("no data rows found")

    header: str | None = None
    for line in reversed(lines[:first]):
        if line.strip() and not is_rule(line):
            header = line
            break
    if header is None:
        raise IoParseError("no header line above the first data row")

    rows: list[str] = []
    for line in lines[first:]:
        if is_data_row(line):
            rows.append(line)
        elif is_rule(line):
            continue
        else:
            break
    return header, rows


def split_header(header: str, separator: str) -> list[str]:
    """Split a header line and strip each cell (quotes included)."""
    return [cell.strip().strip('"').strip() for cell in header.split(separator)]


def read_delimited_block(
    header: Sequence[str],
    rows: Iterable[str],
    *,
    separator: str = ",",
    null_values: Sequence[str] = (),
) -> pl.DataFrame:
    """
    Parse header + data rows with polars.read_csv, everything read as strings.

    Cells are left as Utf8 so cleaning (thousands separators, sentinels) happens in
    vizwalk.wrangle.clean with explicit casts.

    Raises:
        IoParseError: If polars cannot parse the block.
    """
    if len(set(header)) != len(header):
        raise IoParseError(f"duplicate header cells: {list(header)!r}")
    body = "\n".join(rows)
    if not body:
        raise IoParseError("empty data block")
    try:
        return pl.read_csv(
            io.BytesIO(body.encode("utf-8")),
            separator=separator,
            has_header=False,
            schema={c: pl.Utf8 for c in header},
            null_values=list(null_values) or None,
            quote_char='"',
        )
    except pl.exceptions.PolarsError as exc:
        raise IoParseError(f"failed to parse delimited block: {exc}") from exc
