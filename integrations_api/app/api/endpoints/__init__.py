"""
Endpoint subpackage.

Each module defines an APIRouter for one resource (users, payables,
assignors).  The routers are aggregated in ``api/router.py``.
"""
