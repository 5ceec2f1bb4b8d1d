"""
Endpoint modules.

Each module defines an APIRouter for one audience (students or
administrators).  The routers are aggregated in ``api/router.py``.
"""
