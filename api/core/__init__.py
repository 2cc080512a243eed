"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that both features use (DB wiring,
settings). Keep feature-specific SQL and HTTP mapping in the corresponding
feature package (`todos/`, `marketplace/`).
"""
