"""
SW Favorites
============

HTTP service storing favorite Star Wars movies and characters in MongoDB
and proxying the public Star Wars catalog API.
"""

__version__ = "1.0.0"
