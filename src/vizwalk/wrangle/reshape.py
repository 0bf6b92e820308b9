"""
Wide/long reshaping.

`longer` and `wider` name the two directions the lessons talk about and delegate to
polars' unpivot/pivot.
"""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

__all__ = ["longer", "wider"]


def longer(
    df: pl.DataFrame,
    index: str | Sequence[str],
    *,
    names_to: str = "name",
    values_to: str = "value",
    columns: Sequence[str] | None = None,
) -> pl.DataFrame:
    """
    Stack value columns into (names_to, values_to) pairs.

    Args:
        df (pl.DataFrame): Wide frame.
        index (str | Sequence[str]): Identifier column(s) kept as-is.
        names_to (str): Column receiving the former column names.
        values_to (str): Column receiving the values.
        columns (Sequence[str] | None): Columns to stack; all non-index columns when None.

    Examples:
        >>> wide = pl.DataFrame({"site": ["Morris"], "1931": [1.0], "1932": [2.0]})
        >>> longer(wide, "site", names_to="year", values_to="y").rows()
        [('Morris', '1931', 1.0), ('Morris', '1932', 2.0)]
    """
    idx = [index] if isinstance(index, str) else list(index)
    on = list(columns) if columns is not None else [c for c in df.columns if c not in idx]
    return df.unpivot(index=idx, on=on, variable_name=names_to, value_name=values_to)


def wider(
    df: pl.DataFrame,
    index: str | Sequence[str],
    *,
    names_from: str,
    values_from: str,
    aggregate: str | None = None,
) -> pl.DataFrame:
    """
    Spread (names_from, values_from) pairs into one column per name.

    Rows are sorted by the index and the new columns follow first appearance order of
    `names_from`. Duplicate (index, name) pairs need an aggregate ("sum", "mean", ...).
    """
    idx = [index] if isinstance(index, str) else list(index)
    return df.pivot(
        on=names_from,
        index=idx,
        values=values_from,
        aggregate_function=aggregate,  # type: ignore[arg-type]
    ).sort(idx)
