"""
Pydantic schema definitions for API payloads.

Students and groups each define their own models for request and
response bodies.  Field names are snake_case in Python and exposed
under their camelCase wire names through aliases.
"""
