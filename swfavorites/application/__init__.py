"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create favorite, list favorites)
- Services: Application services that coordinate use cases and the catalog proxy
- DTOs: Pydantic models for API requests and responses
"""
