"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the storage backends so that the HTTP
representation does not depend on how coffees are persisted.
"""
