"""Domain models: pure data structures (Pydantic v2).

The domain knows nothing about HTTP or the CLI.
"""
