from collections.abc import Sequence

from saltaire_guide.schemas.directory import BadgeSpec
from saltaire_guide.schemas.listings import Listing


def capability_badges(listing: Listing, badges: Sequence[BadgeSpec]) -> list[str]:
    """Labels for the capability flags that are set, in declared order."""
    return [badge.label for badge in badges if getattr(listing, badge.flag, False)]


def listing_badges(listing: Listing, badges: Sequence[BadgeSpec]) -> list[str]:
    """Full card badge row: tags, accreditations, then capabilities.

    Duplicates are dropped keeping the first occurrence, so a tag such as
    "Emergency" is not repeated by the matching capability badge.
    """
    seen: set[str] = set()
    labels: list[str] = []
    for label in [*listing.tags, *listing.accreditations, *capability_badges(listing, badges)]:
        if label not in seen:
            seen.add(label)
            labels.append(label)
    return labels
