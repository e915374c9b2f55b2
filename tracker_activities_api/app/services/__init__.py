"""
Service layer.

Services receive an open ``sqlite3.Connection`` and perform the
precondition checks and writes for a single domain.
"""
