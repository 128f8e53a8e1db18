"""
Configuration constants for the blog posts client.

This module centralizes all configurable parameters to make the client
easy to point at a different blog or tune for a slow server.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """Blog API configuration settings."""
    base_url: str = field(
        default_factory=lambda: os.environ.get("BLOG_POSTS_BASE_URL", "http://localhost:8000")
    )
    posts_endpoint: str = "/app/api/posts.json"
    meta_endpoint: str = "/app/api/index.json"
    timeout_seconds: float = 10.0
    
    # A single attempt unless configured otherwise
    max_retries: int = 1
    retry_delay_seconds: float = 1.0


@dataclass
class ViewConfig:
    """Posts view configuration."""
    posts_per_page: int = 5


@dataclass
class NavConfig:
    """Navigation toggle configuration."""
    element_id: str = "navigation"
    hidden_class: str = "hidden"
    parser: str = "html.parser"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "blog_posts.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    nav: NavConfig = field(default_factory=NavConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
