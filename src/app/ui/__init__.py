"""
vizwalk viewer UI package.

Modules:
    - app: Streamlit application (streamlit_app): sidebar controls and step rendering.
    - helpers: Pure helpers for lesson options and table previews.

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_lesson="geyser")
"""

from __future__ import annotations

from .app import streamlit_app

__all__ = [
    "streamlit_app",
]
