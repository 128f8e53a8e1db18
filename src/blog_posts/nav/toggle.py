"""
Navigation Toggle Module

Shows and hides the site's navigation menu by flipping a marker class
on the navigation element of an HTML document.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..config import config


logger = logging.getLogger(__name__)


class NavigationNotFoundError(LookupError):
    """Raised when the document has no navigation element."""


def find_nav(document: BeautifulSoup, element_id: Optional[str] = None) -> Tag:
    """
    Find the navigation element.
    
    Raises:
        NavigationNotFoundError: If no element carries the id.
    """
    element_id = element_id or config.nav.element_id
    nav = document.find(id=element_id)
    if nav is None:
        raise NavigationNotFoundError(f"No element with id '{element_id}'")
    return nav


def is_hidden(
    document: BeautifulSoup,
    element_id: Optional[str] = None,
    hidden_class: Optional[str] = None
) -> bool:
    """Whether the navigation element currently carries the hidden class."""
    hidden_class = hidden_class or config.nav.hidden_class
    nav = find_nav(document, element_id)
    return hidden_class in nav.get("class", [])


def trigger_nav(
    document: BeautifulSoup,
    element_id: Optional[str] = None,
    hidden_class: Optional[str] = None
) -> bool:
    """
    Flip the hidden class on the navigation element.
    
    Removes the class if present (reveal), adds it otherwise (conceal).
    Other classes on the element are left alone.
    
    Args:
        document: Parsed HTML document, modified in place.
        element_id: Id of the navigation element.
        hidden_class: Marker class that hides it.
    
    Returns:
        True if the element is now hidden.
    """
    hidden_class = hidden_class or config.nav.hidden_class
    nav = find_nav(document, element_id)
    classes = list(nav.get("class", []))
    
    if hidden_class in classes:
        classes = [c for c in classes if c != hidden_class]
        hidden = False
    else:
        classes.append(hidden_class)
        hidden = True
    
    if classes:
        nav["class"] = classes
    else:
        del nav["class"]
    
    logger.debug(f"Navigation {'hidden' if hidden else 'revealed'}")
    return hidden


def toggle_nav_file(path: Union[str, Path], encoding: str = "utf-8") -> bool:
    """
    Toggle the navigation element of an HTML file in place.
    
    Returns:
        True if the navigation is now hidden.
    """
    path = Path(path)
    document = BeautifulSoup(path.read_text(encoding=encoding), config.nav.parser)
    
    hidden = trigger_nav(document)
    path.write_text(str(document), encoding=encoding)
    
    logger.info(f"Navigation in {path} is now {'hidden' if hidden else 'visible'}")
    return hidden
