"""
Pydantic schema definitions for API payloads.

Each content domain (gallery, blog, events, services, etc.) defines its
own request models.  Models accept camelCase keys, the format stored on
disk and used by the web clients, as well as their snake_case field
names.  Unknown keys are kept and stored as-is.
"""
