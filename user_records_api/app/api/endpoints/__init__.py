"""
Endpoint subpackage.

Each module in this package defines an APIRouter.  The routers are
aggregated in ``api/router.py`` and included in the main application.
"""
