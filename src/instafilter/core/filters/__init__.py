"""Pixel implementations of the built-in filters.

The package keeps the maths separate from the image plumbing:
- algorithms: pure NumPy functions operating on ``float32`` RGB arrays
- pillow_executor: filters that map directly onto :mod:`PIL.ImageFilter`
- numpy_executor: filters implemented with :mod:`algorithms`
- utils: alpha handling and array conversion helpers
"""

from __future__ import annotations

from .facade import apply_filter, supported_filter_ids

__all__ = ["apply_filter", "supported_filter_ids"]
