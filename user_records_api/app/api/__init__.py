"""
API package.

``router.py`` aggregates the domain routers defined in ``endpoints``;
``deps.py`` holds the FastAPI dependencies that hand the shared store
to each request.
"""
