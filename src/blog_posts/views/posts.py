"""
Posts View Module

Binds the post list to view state. A controller owns one PostsViewState,
fills it from an injected fetch callable and notifies an optional
listener whenever the state changes.
"""

import logging
from typing import Callable, List, Optional
from dataclasses import dataclass, field

from ..api.client import Post
from ..api.result import FetchResult
from ..config import config


logger = logging.getLogger(__name__)


FetchPosts = Callable[[], FetchResult]


def page_count(posts: List[Post], per_page: Optional[int] = None) -> int:
    """Number of full pages in a post list."""
    if per_page is None:
        per_page = config.view.posts_per_page
    return len(posts) // per_page


@dataclass
class PostsViewState:
    """Data held for rendering the post list."""
    posts: List[Post] = field(default_factory=list)
    error: Optional[str] = None
    loading: bool = False
    loaded: bool = False
    page_count: int = 0
    
    @property
    def status(self) -> str:
        if self.loading:
            return "loading"
        if self.error is not None:
            return "failed"
        if self.loaded:
            return "loaded"
        return "idle"


class PostsController:
    """
    Controller for the post list view.
    
    Each call to activate() starts one independent fetch. Completions are
    tagged with the activation that started them, so a late answer from
    an earlier activation cannot overwrite a newer one.
    """
    
    def __init__(
        self,
        fetch_posts: FetchPosts,
        on_change: Optional[Callable[[PostsViewState], None]] = None
    ):
        """
        Initialize the controller.
        
        Args:
            fetch_posts: Callable returning a FetchResult of posts,
                e.g. BlogAPI().get_posts.
            on_change: Called with the state after every mutation.
        """
        self.fetch_posts = fetch_posts
        self.on_change = on_change
        self.state = PostsViewState()
        self._generation = 0
    
    @property
    def generation(self) -> int:
        """Number of the most recent activation."""
        return self._generation
    
    def activate(self) -> PostsViewState:
        """
        Reset the view and load posts.
        
        Returns:
            The view state after the fetch has completed.
        """
        self._generation += 1
        generation = self._generation
        
        self.state.posts = []
        self.state.error = None
        self.state.page_count = 0
        self.state.loading = True
        self.state.loaded = False
        self._notify()
        
        logger.info(f"Activation {generation}: fetching posts")
        try:
            result = self.fetch_posts()
        except Exception as e:
            logger.exception(f"Activation {generation}: fetch raised")
            result = FetchResult.failure(f"Failed to load posts: {e}")
        self.on_complete(result, generation)
        
        return self.state
    
    def on_complete(self, result: FetchResult, generation: Optional[int] = None) -> None:
        """
        Apply a finished fetch to the view state.
        
        Args:
            result: Outcome of the posts fetch.
            generation: Activation the fetch belongs to; defaults to the
                current one. Results from older activations are dropped.
        """
        if generation is None:
            generation = self._generation
        
        if generation != self._generation:
            logger.info(
                f"Ignoring result of activation {generation} "
                f"(current is {self._generation})"
            )
            return
        
        if result.ok and not isinstance(result.value, (list, tuple)):
            logger.warning(f"Expected a list of posts, got {type(result.value).__name__}")
            result = FetchResult.failure(
                f"Expected a list of posts, got {type(result.value).__name__}",
                result.status_code
            )
        
        self.state.loading = False
        
        if result.ok:
            self.state.posts = list(result.value)
            self.state.page_count = page_count(self.state.posts)
            self.state.error = None
            self.state.loaded = True
            logger.info(f"Activation {generation}: {len(self.state.posts)} posts loaded")
        else:
            self.state.error = result.error or "Failed to load posts"
            logger.warning(f"Activation {generation}: load failed: {self.state.error}")
        
        self._notify()
    
    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)
