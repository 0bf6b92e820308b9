"""
Top-level Streamlit app package.

This package hosts the interactive lesson viewer (Streamlit) decoupled from the
vizwalk.* library modules. Chart builders and lessons live under vizwalk.*; the
Streamlit UI shell and app-specific caching live here.

CLI entrypoint (configured in pyproject.toml):
    vizwalk-app = app.main:main
"""

from __future__ import annotations
