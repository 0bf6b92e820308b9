"""
Frozen descriptors for the datasets used by the walkthrough.

Notes:
    - Descriptors declare the cleaned column names/dtypes each reader must return, the
      bundled filename, and required/nullable columns.
    - Column names are lower_snake.
    - dtype ∈ {"i64", "f64", "str"}; vizwalk.io.validate casts to these.
    - Core is zero-IO; vizwalk.io reads files and validates frames against these descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import SchemaError
from .grammar import DatasetName, dataset_name_from_value, is_lower_snake

__all__ = [
    "DatasetDescriptor",
    "GEYSER_DESC",
    "BARLEY_DESC",
    "HAIR_EYE_COLOR_DESC",
    "CANCER_INCIDENCE_DESC",
    "UNEMPLOYMENT_DESC",
    "CHILD_MORTALITY_DESC",
    "COUNTRY_CODES_DESC",
    "get_dataset",
    "list_datasets",
]

_DTYPES = frozenset({"i64", "f64", "str"})


@dataclass(frozen=True)
class DatasetDescriptor:
    """
    Frozen descriptor for a walkthrough dataset.

    Attributes:
        name (DatasetName): Canonical dataset identifier.
        filename (str): File name under the data directory (bundled or configured).
        columns (dict[str, str]): Cleaned column -> dtype ("i64" | "f64" | "str").
        required (list[str]): Columns that must exist and be populated.
        nullable (list[str]): Columns permitted to contain nulls.
        description (str): One-line description shown by the CLI.
        source (str): Provenance of the bundled sample.

    Examples:
        >>> from vizwalk.core.tables import get_dataset
        >>> desc = get_dataset("geyser")
        >>> sorted(desc.columns)
        ['eruptions', 'waiting']
    """

    name: DatasetName
    filename: str
    columns: dict[str, str]
    required: list[str]
    nullable: list[str] = field(default_factory=list)
    description: str = ""
    source: str = ""

    def __post_init__(self) -> None:
        bad = [c for c in self.columns if not is_lower_snake(c)]
        if bad:
            raise SchemaError(f"{self.name.value}: columns must be lower_snake: {bad!r}")
        unknown = {c: d for c, d in self.columns.items() if d not in _DTYPES}
        if unknown:
            raise SchemaError(f"{self.name.value}: unknown dtypes {unknown!r}")
        cols = set(self.columns)
        if not set(self.required) <= cols or not set(self.nullable) <= cols:
            raise SchemaError(f"{self.name.value}: required/nullable must be subsets of columns")
        if set(self.required) & set(self.nullable):
            raise SchemaError(f"{self.name.value}: required and nullable overlap")


GEYSER_DESC = DatasetDescriptor(
    name=DatasetName.GEYSER,
    filename="geyser.csv",
    columns={"eruptions": "f64", "waiting": "i64"},
    required=["eruptions", "waiting"],
    description="Old Faithful eruption durations and waiting times (minutes).",
    source="Sample of the Old Faithful eruption records (Azzalini and Bowman).",
)

BARLEY_DESC = DatasetDescriptor(
    name=DatasetName.BARLEY,
    filename="barley.csv",
    columns={"yield": "f64", "variety": "str", "year": "i64", "site": "str"},
    required=["yield", "variety", "year", "site"],
    description="Barley yields (bushels/acre) by variety, site and year, Minnesota 1931-1932.",
    source="Illustrative sample shaped like the Immer et al. trial data used by Cleveland.",
)

HAIR_EYE_COLOR_DESC = DatasetDescriptor(
    name=DatasetName.HAIR_EYE_COLOR,
    filename="hair_eye_color.csv",
    columns={"hair": "str", "eye": "str", "sex": "str", "freq": "i64"},
    required=["hair", "eye", "sex", "freq"],
    description="Hair and eye color counts of 592 statistics students, by sex.",
    source="Snee (1974), as tabulated in the HairEyeColor contingency table.",
)

CANCER_INCIDENCE_DESC = DatasetDescriptor(
    name=DatasetName.CANCER_INCIDENCE,
    filename="cancer_incidence.csv",
    columns={
        "year": "i64",
        "sex": "str",
        "cancer_site": "str",
        "count": "i64",
        "population": "i64",
        "age_adjusted_rate": "f64",
    },
    required=["year", "sex", "cancer_site", "population"],
    nullable=["count", "age_adjusted_rate"],
    description="Cancer incidence counts and age-adjusted rates per 100,000 by site and sex.",
    source="Illustrative sample in the layout of a registry statistics CSV export.",
)

UNEMPLOYMENT_DESC = DatasetDescriptor(
    name=DatasetName.UNEMPLOYMENT,
    filename="unemployment.txt",
    columns={
        "laus_code": "str",
        "state_fips": "str",
        "county_fips": "str",
        "fips": "str",
        "county_id": "i64",
        "county_name": "str",
        "state": "str",
        "year": "i64",
        "labor_force": "i64",
        "employed": "i64",
        "unemployed": "i64",
        "unemployment_rate": "f64",
    },
    required=["state_fips", "county_fips", "fips", "county_id", "county_name", "state", "year"],
    nullable=["laus_code", "labor_force", "employed", "unemployed", "unemployment_rate"],
    description="County labor force and unemployment, annual averages (pipe-separated text).",
    source="Illustrative sample in the layout of a county labor-force text table.",
)

CHILD_MORTALITY_DESC = DatasetDescriptor(
    name=DatasetName.CHILD_MORTALITY,
    filename="child_mortality.csv",
    columns={"country": "str", "year": "i64", "deaths_per_1000": "f64"},
    required=["country", "year", "deaths_per_1000"],
    description="Under-five deaths per 1,000 live births by country and year (wide spreadsheet).",
    source="Illustrative sample in the layout of a country-by-year indicator spreadsheet.",
)

COUNTRY_CODES_DESC = DatasetDescriptor(
    name=DatasetName.COUNTRY_CODES,
    filename="country_codes.csv",
    columns={"country": "str", "iso3": "str", "iso_numeric": "i64", "region": "str"},
    required=["country", "iso3", "iso_numeric"],
    nullable=["region"],
    description="Country name to ISO 3166 alpha-3 and numeric code crosswalk.",
    source="ISO 3166-1 codes for the countries in the bundled samples.",
)

_REGISTRY: dict[DatasetName, DatasetDescriptor] = {
    d.name: d
    for d in (
        GEYSER_DESC,
        BARLEY_DESC,
        HAIR_EYE_COLOR_DESC,
        CANCER_INCIDENCE_DESC,
        UNEMPLOYMENT_DESC,
        CHILD_MORTALITY_DESC,
        COUNTRY_CODES_DESC,
    )
}


def get_dataset(name: DatasetName | str) -> DatasetDescriptor:
    """
    Return the descriptor for a dataset.

    Raises:
        GrammarError: If the name is not a known dataset.
    """
    return _REGISTRY[dataset_name_from_value(name)]


def list_datasets() -> list[DatasetDescriptor]:
    """All descriptors in DatasetName order."""
    return [_REGISTRY[n] for n in DatasetName]
