"""
Adapters for the domain ports.

Currently a single in-memory user store.
"""
