"""Contracts (Protocol) implemented by concrete adapters."""
