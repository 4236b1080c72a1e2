"""Dependency injection container and providers."""
