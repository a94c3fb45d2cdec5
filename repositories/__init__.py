"""
repositories/ - Data Access Layer
==================================
Lesson Store implementations. Each repository encapsulates every query for
one storage backend (SQLite, MongoDB, in-memory) and returns Lesson objects.
"""
