"""
Infrastructure Layer
====================

Concrete adapters for external systems: the MongoDB document store and
the Star Wars catalog HTTP API.
"""
