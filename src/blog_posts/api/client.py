"""
API Client Module

HTTP clients for the blog's static JSON API: the post list and the
blog metadata. Failures come back as FetchResult values, never raised.
"""

import logging
import time
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, asdict

import httpx

from ..config import config
from .result import FetchResult


logger = logging.getLogger(__name__)


@dataclass
class Post:
    """Represents a blog post from the API."""
    title: str
    body: str
    date: str
    
    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "Post":
        """Build a post from a JSON object. Missing fields become empty strings."""
        return cls(
            title=item.get("title", ""),
            body=item.get("body", ""),
            date=item.get("date", "")
        )
    
    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class _JSONResource:
    """
    Shared plumbing for clients of the blog's JSON files.
    
    Features:
    - Optional injected httpx.Client
    - Configurable timeout
    - Retry with exponential backoff on transport errors
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None
    ):
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = config.api.timeout_seconds
        self._client = client
    
    def _request(self, method: str, url: str) -> httpx.Response:
        if self._client is not None:
            return self._client.request(method, url)
        
        with httpx.Client(timeout=self.timeout) as client:
            return client.request(method, url)
    
    def _get_json(self, endpoint: str) -> FetchResult:
        """
        GET a JSON document.
        
        Args:
            endpoint: Path appended to the base URL.
        
        Returns:
            FetchResult holding the decoded body, or the failure reason.
        """
        url = f"{self.base_url}{endpoint}"
        max_retries = max(1, config.api.max_retries)
        
        logger.info(f"Fetching {url}")
        
        last_error = None
        
        for attempt in range(max_retries):
            try:
                response = self._request("GET", url)
                
            except httpx.TimeoutException as e:
                last_error = f"Timeout fetching {url}: {e}"
                logger.warning(f"Timeout on attempt {attempt + 1}: {e}")
                
            except httpx.HTTPError as e:
                last_error = f"Error fetching {url}: {e}"
                logger.warning(f"HTTP error on attempt {attempt + 1}: {e}")
            
            else:
                return self._decode(url, response)
            
            # Wait before retry (exponential backoff)
            if attempt < max_retries - 1:
                delay = config.api.retry_delay_seconds * (2 ** attempt)
                logger.info(f"Waiting {delay}s before retry...")
                time.sleep(delay)
        
        if max_retries > 1:
            logger.error(f"All {max_retries} attempts failed")
        return FetchResult.failure(last_error)
    
    def _decode(self, url: str, response: httpx.Response) -> FetchResult:
        status = response.status_code
        
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError:
            logger.warning(f"{url} returned HTTP {status}")
            return FetchResult.failure(f"HTTP {status} from {url}", status)
        
        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Malformed JSON from {url}: {e}")
            return FetchResult.failure(f"Malformed JSON from {url}: {e}", status)
        
        logger.debug(f"{url} -> HTTP {status}, {len(response.content)} bytes")
        return FetchResult.success(data, status)
    
    def test_connection(self) -> bool:
        """
        Check that the blog server answers at all.
        
        Returns:
            True if the server responded without an error status.
        """
        try:
            response = self._request("HEAD", self.base_url + "/")
            return response.status_code < 400
        except httpx.HTTPError as e:
            logger.warning(f"Connection test failed: {e}")
            return False


class BlogAPI(_JSONResource):
    """HTTP client for the blog's post list."""
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None
    ):
        """Initialize the API client."""
        super().__init__(base_url, client)
        logger.info(f"BlogAPI initialized (base_url: {self.base_url})")
    
    def get_posts(self) -> FetchResult:
        """
        Fetch every post.
        
        Returns:
            FetchResult whose value is the list of Post objects in server
            order, or a failure for transport errors, error statuses and
            bodies that are not a JSON array of objects.
        """
        result = self._get_json(config.api.posts_endpoint)
        if not result.ok:
            return result
        
        items = result.value
        if not isinstance(items, list):
            logger.warning(f"Unexpected posts format: {type(items).__name__}")
            return FetchResult.failure(
                f"Expected a JSON array of posts, got {type(items).__name__}",
                result.status_code
            )
        
        posts: List[Post] = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning(f"Post {index} is not an object: {item!r}")
                return FetchResult.failure(
                    f"Post {index} is not a JSON object",
                    result.status_code
                )
            posts.append(Post.from_dict(item))
        
        logger.info(f"Fetched {len(posts)} posts successfully")
        return FetchResult.success(posts, result.status_code)


class BlogMetaAPI(_JSONResource):
    """
    HTTP client for the blog's static metadata: last update, number of
    posts and whatever else the author publishes in index.json.
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None
    ):
        super().__init__(base_url, client)
        logger.info(f"BlogMetaAPI initialized (base_url: {self.base_url})")
    
    def get_meta_data(self) -> FetchResult:
        """Fetch the metadata object, returned as a dict."""
        result = self._get_json(config.api.meta_endpoint)
        if result.ok and not isinstance(result.value, dict):
            return FetchResult.failure(
                f"Expected a JSON object of metadata, got {type(result.value).__name__}",
                result.status_code
            )
        return result
