"""
db/ - Database Layer
====================
Owns the process-wide database handles (SQLite connection, MongoDB client)
and SQLite schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
