"""
Endpoint modules.

Each module defines an ``APIRouter`` for one concern.  They are
aggregated in ``api/router.py`` and mounted under ``/api``.
"""
