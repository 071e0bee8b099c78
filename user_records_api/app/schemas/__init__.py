"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shape of requests and responses and are kept
separate from the SQL row layout (``first_name``/``last_name`` columns)
used by the repository.
"""
