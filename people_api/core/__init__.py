"""
Core utilities shared across the People API: settings and logging setup (observability).

Routers and repositories depend on these primitives rather than reading the
environment or configuring handlers themselves.
"""
