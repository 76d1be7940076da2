"""
Infrastructure Layer
====================

Concrete implementations of domain contracts backed by MongoDB.
"""
