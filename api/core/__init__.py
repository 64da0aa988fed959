"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks the feature packages rely on
(DB pool, settings, logging). Keep post-specific SQL and validation in
`posts/`.
"""
