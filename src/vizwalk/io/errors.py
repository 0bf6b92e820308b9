"""
Custom exceptions for the vizwalk.io module.

Purpose
- Provide IO-layer specific error types that map cleanly to responsibilities in vizwalk.io.
- Keep vizwalk.core as the source of truth for naming/descriptor errors (see vizwalk.core.errors).

Source of truth and boundaries
- vizwalk.core.errors.GrammarError is raised for unknown dataset names.
- vizwalk.io raises Io* errors for reading/cleaning concerns:
  - IoConfigError: invalid or unsupported configuration.
  - IoSchemaError: a cleaned frame failed validation against its DatasetDescriptor.
  - IoParseError: a text table could not be located or parsed.
- Missing files surface as the builtin FileNotFoundError with the resolved path.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in vizwalk.io.

    Notes:
        Use this as a catch-all for reader failures, distinct from vizwalk.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid or unsupported.

    Examples:
        - data_dir points at a file rather than a directory
        - Unsupported spreadsheet suffix
    """


class IoSchemaError(IoError):
    """
    Raised when a DataFrame fails schema validation against a DatasetDescriptor.

    Notes:
        Scalar columns (i64, f64, str) are cast non-strictly before raising.
    """


class IoParseError(IoError):
    """
    Raised when a semi-structured text table has no recognizable data rows or header.

    Notes:
        Readers strip preambles and footers before parsing; this error means nothing
        matched the expected row shape.
    """
