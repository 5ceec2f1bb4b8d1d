"""
Top‑level package for the Student Points API.

This file makes ``student_points_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``student_points_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
