"""
Blog Posts

Client for a personal blog's post feed: fetches posts and blog metadata,
binds them to view state, and toggles the site's navigation menu.
"""

__version__ = "0.1.0"
