"""
Views Module

Provides the post list controller and its view state.
"""

from .posts import PostsController, PostsViewState, page_count

__all__ = ["PostsController", "PostsViewState", "page_count"]
