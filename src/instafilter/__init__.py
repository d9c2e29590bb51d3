"""Instafilter: apply built-in photo filters with a single intensity slider."""

from __future__ import annotations

__version__ = "1.0.0"
