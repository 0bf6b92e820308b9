"""
Canonical vizwalk vocabulary and naming helpers.

Defines the dataset names used throughout the walkthrough, the kinds of lesson steps,
and the Vega-Lite measurement types used when encoding fields. Includes zero-IO
normalization helpers used by the readers and lesson models.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE
   - Enum serialized values and column names: lower_snake

2) Display headers are data, not names:
   - Files often carry headers such as "Age-Adjusted Rate" or "Cancer Site".
     Readers normalize them with `to_lower_snake` before any other step.

Grammar-of-graphics terms
-------------------------
| Term               | Meaning                                          | altair construct
|--------------------|--------------------------------------------------|------------------------------
| data               | the table being drawn                            | alt.Chart(alt.Data(values=...))
| aesthetic mapping  | column -> visual channel                         | .encode(x=..., color=...)
| geometric object   | the mark drawn per row                           | .mark_point(), .mark_bar()
| statistic          | summary computed before drawing                  | .transform_density(), alt.Bin
| scale              | data domain -> channel range                     | alt.Scale(type="log")
| coordinate system  | how positions are laid out                       | .project(type="albersUsa")
| facet              | small multiples by a grouping column             | .facet(row=...), alt.Row
| theme              | non-data ink                                     | alt.theme.enable(...)

Examples
--------
>>> from vizwalk.core.grammar import to_lower_snake, encoding_shorthand, EncodingType
>>> to_lower_snake("Age-Adjusted Rate")
'age_adjusted_rate'
>>> encoding_shorthand("waiting", EncodingType.QUANTITATIVE)
'waiting:Q'
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

from .errors import GrammarError

__all__ = [
    "DatasetName",
    "StepKind",
    "EncodingType",
    "is_lower_snake",
    "assert_lower_snake",
    "to_lower_snake",
    "dataset_name_from_value",
    "step_kind_from_value",
    "encoding_shorthand",
    "ensure_all_enum_values_lower_snake",
]


class DatasetName(str, Enum):
    """Datasets exercised by the walkthrough (serialized lower_snake)."""

    GEYSER = "geyser"
    BARLEY = "barley"
    HAIR_EYE_COLOR = "hair_eye_color"
    CANCER_INCIDENCE = "cancer_incidence"
    UNEMPLOYMENT = "unemployment"
    CHILD_MORTALITY = "child_mortality"
    COUNTRY_CODES = "country_codes"


class StepKind(str, Enum):
    """What a lesson step produces."""

    PROSE = "prose"
    TABLE = "table"
    CHART = "chart"


class EncodingType(str, Enum):
    """Vega-Lite measurement types, serialized as their one-letter shorthands."""

    QUANTITATIVE = "Q"
    ORDINAL = "O"
    NOMINAL = "N"
    TEMPORAL = "T"


_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")
_NON_WORD_RE: Final[re.Pattern[str]] = re.compile(r"[^0-9a-zA-Z]+")
_CAMEL_RE: Final[re.Pattern[str]] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("hair_eye_color")
      True
      >>> is_lower_snake("HairEye")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Raises:
      GrammarError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise GrammarError(f"{what} must be lower_snake (got {value!r})")


def to_lower_snake(text: str) -> str:
    """
    Normalize a display header into a lower_snake column name.

    Args:
      text (str): Header text such as "Cancer Site", "Age-Adjusted Rate", or "laborForce".

    Returns:
      str: lower_snake name (e.g., "cancer_site").

    Raises:
      GrammarError: If nothing alphanumeric remains.

    Examples:
      >>> to_lower_snake("  County Name/State Abbreviation ")
      'county_name_state_abbreviation'
      >>> to_lower_snake("laborForce")
      'labor_force'
    """
    split = _CAMEL_RE.sub("_", (text or "").strip())
    name = _NON_WORD_RE.sub("_", split).strip("_").lower()
    if not name:
        raise GrammarError(f"cannot derive a column name from {text!r}")
    return name


def dataset_name_from_value(value: str | DatasetName) -> DatasetName:
    """
    Parse a dataset name.

    Raises:
      GrammarError: If the value is not a known dataset.

    Examples:
      >>> dataset_name_from_value("Geyser") is DatasetName.GEYSER
      True
    """
    if isinstance(value, DatasetName):
        return value
    norm = (value or "").strip().lower().replace("-", "_")
    try:
        return DatasetName(norm)
    except ValueError as exc:
        allowed = sorted(d.value for d in DatasetName)
        raise GrammarError(f"dataset must be one of {allowed} (got {value!r})") from exc


def step_kind_from_value(value: str | StepKind) -> StepKind:
    """Parse a step kind ("prose" | "table" | "chart")."""
    if isinstance(value, StepKind):
        return value
    try:
        return StepKind((value or "").strip().lower())
    except ValueError as exc:
        allowed = sorted(k.value for k in StepKind)
        raise GrammarError(f"step kind must be one of {allowed} (got {value!r})") from exc


def encoding_shorthand(field: str, kind: EncodingType | str) -> str:
    """
    Build an altair shorthand string such as "yield:Q".

    Examples:
      >>> encoding_shorthand("site", "N")
      'site:N'
    """
    code = kind.value if isinstance(kind, EncodingType) else EncodingType(kind).value
    return f"{field}:{code}"


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
