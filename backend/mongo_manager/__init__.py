"""
MongoDB Web Manager - HTTP API for browsing and editing a MongoDB instance.
"""
__version__ = "0.1.0"
