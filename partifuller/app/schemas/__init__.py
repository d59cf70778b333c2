"""
Pydantic schema definitions for RSVP payloads.

Schemas are separated from the storage layer to decouple the API
representation from persistence.
"""
