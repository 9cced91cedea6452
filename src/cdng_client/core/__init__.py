"""Core: configuration, domain models, errors and contracts.

Nothing here performs I/O; adapters depend on the core, never the reverse.
"""
