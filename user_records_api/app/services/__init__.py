"""
Service layer.

Services hold the decision logic of each operation: validation,
store access through an injected repository, and merge rules for
partial updates.  They raise ``core.exceptions`` errors and never build
HTTP responses themselves.
"""
