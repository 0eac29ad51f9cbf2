from collections.abc import Iterable
from typing import TypeVar

from saltaire_guide.schemas.listings import Listing

L = TypeVar("L", bound=Listing)


def partition_listings(listings: Iterable[L]) -> tuple[list[L], list[L]]:
    """Split listings into (featured, others), keeping input order in both."""
    featured: list[L] = []
    others: list[L] = []
    for listing in listings:
        (featured if listing.featured else others).append(listing)
    return featured, others
