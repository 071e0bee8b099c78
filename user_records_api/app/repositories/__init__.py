"""
Data access layer.

Repositories own all SQL.  They receive an open connection instead of
reaching for a global one, which lets the application share a single
connection across requests and lets tests pass an in-memory database.
"""
