from collections.abc import Callable, Mapping, Sequence

from saltaire_guide.schemas.directory import Column, ComparisonRow, ComparisonTable
from saltaire_guide.schemas.listings import Listing

DASH = "—"
PROVIDER_HEADER = "Provider"


def yes_dash(flag: str) -> Callable[[Listing], str]:
    def value(listing: Listing) -> str:
        return "Yes" if getattr(listing, flag, False) else DASH

    return value


def yes_no(flag: str) -> Callable[[Listing], str]:
    def value(listing: Listing) -> str:
        return "Yes" if getattr(listing, flag, False) else "No"

    return value


def tiered(primary: str, secondary: str, secondary_label: str) -> Callable[[Listing], str]:
    """"Yes" when both flags are set, ``secondary_label`` when only ``secondary`` is."""

    def value(listing: Listing) -> str:
        has_secondary = getattr(listing, secondary, False)
        if has_secondary and getattr(listing, primary, False):
            return "Yes"
        if has_secondary:
            return secondary_label
        return DASH

    return value


def text(field: str) -> Callable[[Listing], str]:
    def value(listing: Listing) -> str:
        return getattr(listing, field, None) or DASH

    return value


def mapped(field: str, labels: Mapping[str, str]) -> Callable[[Listing], str]:
    """Display label for an enumerated field; values missing from ``labels`` show a dash."""

    def value(listing: Listing) -> str:
        return labels.get(getattr(listing, field, None), DASH)

    return value


def joined(field: str, limit: int | None = None, sep: str = ", ") -> Callable[[Listing], str]:
    def value(listing: Listing) -> str:
        items = getattr(listing, field, None) or []
        if limit is not None:
            items = items[:limit]
        return sep.join(items) if items else DASH

    return value


def contact() -> Callable[[Listing], str]:
    def value(listing: Listing) -> str:
        return "Call" if listing.phone_tel else DASH

    return value


def project_table(listings: Sequence[Listing], columns: Sequence[Column]) -> ComparisonTable:
    rows = [
        ComparisonRow(
            slug=listing.slug,
            name=listing.name,
            anchor=f"#{listing.slug}",
            featured=listing.featured,
            cells=[column.value(listing) for column in columns],
        )
        for listing in listings
    ]
    return ComparisonTable(
        headers=[PROVIDER_HEADER, *(column.header for column in columns)],
        rows=rows,
    )
