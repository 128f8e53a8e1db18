"""
Main Entry Point

Command line front end for the blog posts client:

1. posts - activate a posts view against the blog API and list the posts
2. meta  - print the blog's metadata object
3. nav   - toggle the navigation menu of a static HTML page in place

Exit codes: 0 on success, 1 on a failed fetch or missing element,
130 when interrupted.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import config
from .api import BlogAPI, BlogMetaAPI
from .nav import NavigationNotFoundError, toggle_nav_file
from .views import PostsController


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)
    
    # Create logger
    logger = logging.getLogger("blog_posts")
    logger.setLevel(logging.DEBUG)

    # Drop handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    
    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='a',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))
    
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    
    return logger


def list_posts(base_url: Optional[str] = None) -> int:
    """Load the post list and print one line per post."""
    api = BlogAPI(base_url=base_url)
    controller = PostsController(api.get_posts)
    state = controller.activate()
    
    if state.status == "failed":
        print(f"Could not load posts: {state.error}", file=sys.stderr)
        return 1
    
    for post in state.posts:
        print(f"{post.date} | {post.title}")
    print(f"{len(state.posts)} posts, {state.page_count} full pages")
    return 0


def show_meta(base_url: Optional[str] = None) -> int:
    """Print the blog metadata as JSON."""
    result = BlogMetaAPI(base_url=base_url).get_meta_data()
    
    if not result.ok:
        print(f"Could not load metadata: {result.error}", file=sys.stderr)
        return 1
    
    print(json.dumps(result.value, indent=2, ensure_ascii=False))
    return 0


def toggle_nav(path: str) -> int:
    """Toggle the navigation menu of an HTML file."""
    try:
        hidden = toggle_nav_file(path)
    except (NavigationNotFoundError, OSError) as e:
        print(f"Could not toggle navigation in {path}: {e}", file=sys.stderr)
        return 1
    
    print("hidden" if hidden else "visible")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-posts",
        description="Fetch blog posts and toggle the site navigation."
    )
    parser.add_argument("--log-level", default=config.log.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper,
                        help="Console log level (default: %(default)s)")
    
    commands = parser.add_subparsers(dest="command", required=True)
    
    posts = commands.add_parser("posts", help="List the blog's posts")
    posts.add_argument("--base-url", help="Blog server URL")
    
    meta = commands.add_parser("meta", help="Show the blog's metadata")
    meta.add_argument("--base-url", help="Blog server URL")
    
    nav = commands.add_parser("nav", help="Toggle the navigation menu of an HTML file")
    nav.add_argument("file", help="HTML file to modify in place")
    
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the blog posts client."""
    args = build_parser().parse_args(argv)
    
    # Set up logging
    logger = setup_logging(args.log_level)
    
    try:
        if args.command == "posts":
            code = list_posts(args.base_url)
        elif args.command == "meta":
            code = show_meta(args.base_url)
        else:
            code = toggle_nav(args.file)
        sys.exit(code)
        
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
