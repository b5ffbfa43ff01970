"""Steam store categories and search."""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from steam_library_browser.steam.launcher import STORE_BASE_URL


@dataclass(frozen=True)
class StoreCategory:
    """A browsable section of the Steam store."""
    title: str
    url: str
    description: str


STORE_CATEGORIES = [
    StoreCategory("Featured", f"{STORE_BASE_URL}/", "Featured games and deals"),
    StoreCategory("New Releases", f"{STORE_BASE_URL}/new/", "Latest game releases"),
    StoreCategory(
        "Top Sellers",
        f"{STORE_BASE_URL}/search/?sort_by=_ASC&category1=998&os=win",
        "Best selling games",
    ),
    StoreCategory("Free to Play", f"{STORE_BASE_URL}/genre/Free%20to%20Play/", "Free games to play"),
    StoreCategory("Early Access", f"{STORE_BASE_URL}/genre/Early%20Access/", "Games in development"),
    StoreCategory("VR Games", f"{STORE_BASE_URL}/vr/", "Virtual Reality games"),
    StoreCategory("Indie Games", f"{STORE_BASE_URL}/tags/en/Indie/", "Independent game developers"),
    StoreCategory("Action Games", f"{STORE_BASE_URL}/tags/en/Action/", "Fast-paced action games"),
    StoreCategory("RPG Games", f"{STORE_BASE_URL}/tags/en/RPG/", "Role-playing games"),
    StoreCategory("Strategy Games", f"{STORE_BASE_URL}/tags/en/Strategy/", "Strategic thinking games"),
    StoreCategory("Simulation Games", f"{STORE_BASE_URL}/tags/en/Simulation/", "Life and business simulators"),
    StoreCategory("Sports Games", f"{STORE_BASE_URL}/tags/en/Sports/", "Sports and racing games"),
]


def filter_categories(query: str = "") -> list[StoreCategory]:
    """Categories whose title or description contains query."""
    query_lower = query.lower()
    return [
        c for c in STORE_CATEGORIES
        if query_lower in c.title.lower() or query_lower in c.description.lower()
    ]


def find_category(title: str) -> Optional[StoreCategory]:
    """Get a category by title (case-insensitive)."""
    title_lower = title.lower().strip()
    for category in STORE_CATEGORIES:
        if category.title.lower() == title_lower:
            return category
    return None


def search_url(query: str) -> str:
    """
    Store search URL for a query.

    Raises:
        ValueError: If the query is blank.
    """
    if not query.strip():
        raise ValueError("Search query required")
    return f"{STORE_BASE_URL}/search/?term={quote(query, safe='')}"
