"""
Application package.

Contains the FastAPI application (``main``) and its layers: ``core``
(configuration, logging, database, exceptions), ``schemas``,
``repositories``, ``services`` and ``api``.
"""

from .main import app, create_app  # noqa: F401
