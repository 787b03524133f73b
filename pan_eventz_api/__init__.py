"""
Top-level package for the Pan Eventz API.

This file makes ``pan_eventz_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``pan_eventz_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
