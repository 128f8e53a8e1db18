"""
Navigation Module

Provides the navigation menu toggle for HTML documents.
"""

from .toggle import NavigationNotFoundError, is_hidden, toggle_nav_file, trigger_nav

__all__ = ["NavigationNotFoundError", "is_hidden", "toggle_nav_file", "trigger_nav"]
