"""
Tests for the Posts View

Tests for binding fetched posts to view state.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

import httpx

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blog_posts.api.client import BlogAPI, Post
from blog_posts.api.result import FetchResult
from blog_posts.views.posts import PostsController, PostsViewState, page_count


POSTS = [
    Post(title="Test title 1", body="Test body 1", date="Test date 1"),
    Post(title="Test title 2", body="Test body 2", date="Test date 2"),
]


class TestPostsController:
    """Tests for PostsController activation and completion."""
    
    @pytest.fixture
    def fake_api(self):
        """A posts fetch that succeeds with two posts."""
        return Mock(return_value=FetchResult.success(POSTS, 200))
    
    @pytest.fixture
    def controller(self, fake_api):
        return PostsController(fake_api)
    
    def test_initial_state(self, controller):
        """Test that posts start as an empty list, never None."""
        assert controller.state.posts == []
        assert controller.state.error is None
        assert controller.state.status == "idle"
    
    def test_fetch_not_called_before_activation(self, controller, fake_api):
        assert fake_api.call_count == 0
    
    def test_fetch_called_once_per_activation(self, controller, fake_api):
        """Test that activation calls the fetch dependency exactly once."""
        controller.activate()
        assert fake_api.call_count == 1
        
        controller.activate()
        assert fake_api.call_count == 2
    
    def test_has_two_posts(self, controller):
        """Test that both posts arrive in order."""
        state = controller.activate()
        
        assert len(state.posts) == 2
        assert [p.title for p in state.posts] == ["Test title 1", "Test title 2"]
        assert state.status == "loaded"
    
    def test_length_matches_fetch(self):
        """Test that the view holds exactly as many posts as were fetched."""
        for n in (0, 1, 5, 12):
            posts = [Post(title=f"t{i}", body="", date="") for i in range(n)]
            controller = PostsController(lambda: FetchResult.success(posts))
            
            assert len(controller.activate().posts) == n
    
    def test_empty_result(self):
        """Test that zero posts is a loaded state, not an error."""
        controller = PostsController(Mock(return_value=FetchResult.success([])))
        
        state = controller.activate()
        
        assert state.posts == []
        assert state.error is None
        assert state.status == "loaded"
    
    def test_posts_replaced_not_appended(self, fake_api, controller):
        """Test that a second activation replaces the list."""
        controller.activate()
        fake_api.return_value = FetchResult.success(POSTS[:1])
        
        state = controller.activate()
        
        assert state.posts == POSTS[:1]
    
    def test_state_holds_a_copy(self, controller):
        """Test that the view list is not the fetched list object."""
        state = controller.activate()
        
        assert state.posts == POSTS
        assert state.posts is not POSTS
    
    def test_empty_list_while_loading(self):
        """Test that the state is an empty list while the fetch is in flight."""
        seen = []
        controller = None
        
        def fetch():
            seen.append((list(controller.state.posts), controller.state.status))
            return FetchResult.success(POSTS)
        
        controller = PostsController(fetch)
        controller.activate()
        controller.activate()
        
        assert seen == [([], "loading"), ([], "loading")]
    
    def test_failure_sets_error(self):
        """Test that a failed fetch surfaces as an error state."""
        controller = PostsController(Mock(return_value=FetchResult.failure("HTTP 500", 500)))
        
        state = controller.activate()
        
        assert state.posts == []
        assert state.error == "HTTP 500"
        assert state.status == "failed"
    
    def test_success_after_failure_clears_error(self, fake_api, controller):
        fake_api.return_value = FetchResult.failure("down")
        controller.activate()
        
        fake_api.return_value = FetchResult.success(POSTS)
        state = controller.activate()
        
        assert state.error is None
        assert state.status == "loaded"
    
    def test_fetch_raising_sets_error(self):
        """Test that an exception from the fetch dependency becomes a failed state."""
        statuses = []
        
        def boom():
            raise RuntimeError("server exploded")
        
        controller = PostsController(boom, on_change=lambda s: statuses.append(s.status))
        
        state = controller.activate()
        
        assert state.status == "failed"
        assert state.loading is False
        assert "server exploded" in state.error
        assert statuses == ["loading", "failed"]
    
    def test_success_without_list_is_failure(self, controller):
        """Test that a completion carrying no post list fails instead of raising."""
        controller.activate()
        
        controller.on_complete(FetchResult.success(None))
        
        assert controller.state.status == "failed"
        assert controller.state.posts == POSTS
    
    def test_stale_completion_ignored(self, controller):
        """Test that a result from an earlier activation cannot overwrite a newer one."""
        controller.activate()
        stale = controller.generation
        controller.activate()
        
        controller.on_complete(FetchResult.success([]), stale)
        
        assert controller.state.posts == POSTS
    
    def test_on_change_notified(self, fake_api):
        """Test that listeners see the loading state and the loaded state."""
        statuses = []
        controller = PostsController(fake_api, on_change=lambda s: statuses.append(s.status))
        
        controller.activate()
        
        assert statuses == ["loading", "loaded"]
    
    def test_page_count(self):
        """Test that the page count is the number of full pages of five."""
        posts = [Post(title=str(i), body="", date="") for i in range(12)]
        controller = PostsController(lambda: FetchResult.success(posts))
        
        assert controller.activate().page_count == 2
    
    def test_with_blog_api(self):
        """Test the controller wired to a real client over a mocked transport."""
        payload = [p.to_dict() for p in POSTS]
        client = httpx.Client(transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json=payload)
        ))
        api = BlogAPI(base_url="http://blog.test", client=client)
        
        state = PostsController(api.get_posts).activate()
        
        assert state.posts == POSTS


class TestPageCount:
    """Tests for the page count helper."""
    
    def test_integer_division(self):
        posts = [Post(title="", body="", date="")] * 9
        
        assert page_count(posts) == 1
        assert page_count(posts, per_page=3) == 3
        assert page_count([]) == 0
    
    def test_explicit_zero_not_replaced(self):
        """Test that per_page=0 is not swapped for the configured default."""
        with pytest.raises(ZeroDivisionError):
            page_count([], per_page=0)


def test_view_state_defaults_are_independent():
    a = PostsViewState()
    b = PostsViewState()
    a.posts.append(POSTS[0])
    
    assert b.posts == []


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
