"""
Pydantic schema definitions for API payloads and the stored roster.

Records are exposed with camelCase keys both on the wire and in the
data file; Python code accesses them through snake_case attributes.
"""
