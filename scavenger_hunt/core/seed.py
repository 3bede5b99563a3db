"""
The fixed list of items every new hunt starts with.
"""
from typing import List, Tuple

from ..models.item import HuntItem


SEED_ITEMS: List[Tuple[str, str]] = [
    ("Red Coffee Mug", "Found at Java House counter."),
    ("Vintage Bookmark", "Corner shelf at Book Nook."),
    ("Movie Ticket Stub", "Ask at the cinema box office."),
    ("Restaurant Coaster", "Table at The Diner."),
    ("Green Plant Tag", "Outside Florals & More."),
    ("Yellow Button", "At Tailor Tim's counter."),
    ("Toy Car", "Window display at Tiny Toys."),
    ("Coffee Coupon", "Café register at Brew & Co."),
    ("Museum Postcard", "Gift shop near the entrance."),
    ("Old Film Poster", "At Retro Reel Theater."),
]


def create_seed_items() -> List[HuntItem]:
    """Create a fresh, unfound item for every seed entry with new ids."""
    return [HuntItem(title=title, clue=clue) for title, clue in SEED_ITEMS]
