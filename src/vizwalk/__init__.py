"""
vizwalk — A data visualization walkthrough built on polars and altair.

## Packages
- core — Grammar, constants, errors, dataset descriptors (zero-IO).
- io — Settings and dataset readers for messy source files.
- wrangle — Cleaning, statistics, reshaping, and geographic joins.
- viz — Altair chart builders and themes.
- lessons — The walkthrough lessons, step runner, and export.
- cli — `vizwalk` console script.

## Import DAG
core <- wrangle <- io; core <- viz; lessons uses all four; cli and the Streamlit app sit on top.
"""

__version__ = "0.1.0"
