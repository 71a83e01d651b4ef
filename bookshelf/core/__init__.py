"""
Core utilities shared across the Bookshelf API.

This package hosts configuration helpers (env vars, paths, feature flags) and
cross-cutting setup such as logging. Services and the GraphQL layer depend on
these primitives instead of reading the environment themselves.
"""
