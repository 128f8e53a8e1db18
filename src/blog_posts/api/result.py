"""
Fetch results and API errors.

Every fetch returns a FetchResult instead of raising, so callers decide
how a failed load shows up in their view.
"""

from dataclasses import dataclass
from typing import Any, Optional


class BlogAPIError(Exception):
    """Base class for blog API errors."""


class FetchError(BlogAPIError):
    """Raised when unwrapping a failed fetch."""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class FetchResult:
    """Outcome of a single fetch: either a value or an error message."""
    ok: bool
    value: Any = None
    error: Optional[str] = None
    status_code: Optional[int] = None
    
    @classmethod
    def success(cls, value: Any, status_code: Optional[int] = None) -> "FetchResult":
        return cls(ok=True, value=value, status_code=status_code)
    
    @classmethod
    def failure(cls, error: str, status_code: Optional[int] = None) -> "FetchResult":
        return cls(ok=False, error=error, status_code=status_code)
    
    def unwrap(self) -> Any:
        """
        Return the fetched value.
        
        Raises:
            FetchError: If the fetch failed.
        """
        if not self.ok:
            raise FetchError(self.error or "fetch failed", self.status_code)
        return self.value
