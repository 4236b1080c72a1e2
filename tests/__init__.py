"""Test suite for the SW Favorites service."""
