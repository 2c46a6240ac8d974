"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies only; the service layer
works with plain dictionaries so that unknown fields in stored records
are preserved.
"""
