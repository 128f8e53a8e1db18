"""
API Client Module

Provides HTTP clients for fetching blog posts and blog metadata.
"""

from .client import BlogAPI, BlogMetaAPI, Post
from .result import BlogAPIError, FetchError, FetchResult

__all__ = ["BlogAPI", "BlogMetaAPI", "Post", "BlogAPIError", "FetchError", "FetchResult"]
