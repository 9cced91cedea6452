"""Adapters: concrete I/O (httpx) implementing the core contracts."""
