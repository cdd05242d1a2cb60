"""Core utilities and shared site primitives.

Modules in this package hold configuration, static content, metadata,
template wiring and small reusable helpers.
"""
