"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: the Favorite domain model
- Validation: pure input checks run before any side effect
- Errors: the error taxonomy surfaced to the API layer
- Repository Interfaces: Abstract contracts for data access
"""
