"""
Service layer.

The roster service loads the document, applies one operation and
stores it back.  API handlers never touch the data file directly.
"""
