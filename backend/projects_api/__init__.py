"""
Projects API: in-memory CRUD service for project records.
"""
__version__ = "0.1.0"
