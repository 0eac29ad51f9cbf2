from collections.abc import Sequence
from html import escape

from saltaire_guide.mappers.badges import listing_badges
from saltaire_guide.schemas.directory import BadgeSpec
from saltaire_guide.schemas.listings import Listing

DEFAULT_IMAGE = "/images/whats-on.png"
DEFAULT_AREA = "Saltaire"
NO_PRICE = "On request"
MAX_CARD_SERVICES = 6


def display_areas(areas: Sequence[str]) -> str:
    return ", ".join(areas or [DEFAULT_AREA])


def _external_link(href: str, label: str, css: str) -> str:
    return (
        f'<a href="{escape(href)}" target="_blank" rel="noopener" class="{css}">'
        f"{escape(label)}</a>"
    )


def build_badge_list(labels: Sequence[str]) -> str:
    if not labels:
        return ""
    items = "".join(f'<li class="badge">{escape(label)}</li>' for label in labels)
    return f'<ul class="badges">{items}</ul>'


def _thumb(listing: Listing, css: str) -> str:
    image = escape(listing.image or DEFAULT_IMAGE)
    return (
        f'<div class="{css}" role="img" aria-label="{escape(listing.name)} branding" '
        f"style=\"background-image: url('{image}')\"></div>"
    )


def _price(listing: Listing) -> str:
    return (
        '<div class="price"><span class="price-label">From</span> '
        f"<strong>{escape(listing.price_from or NO_PRICE)}</strong></div>"
    )


def _contact(listing: Listing) -> str:
    parts: list[str] = []
    if listing.phone_tel:
        parts.append(
            f'<a href="{escape(listing.phone_tel)}">'
            f"{escape(listing.phone_local or listing.phone_tel.removeprefix('tel:'))}</a>"
        )
    else:
        parts.append('<span class="muted">No phone listed</span>')
    if listing.whatsapp_link:
        parts.append(_external_link(listing.whatsapp_link, "WhatsApp", "link"))
    if listing.email:
        email = escape(listing.email)
        parts.append(f'<a href="mailto:{email}">{email}</a>')
    return "<br>".join(parts)


def _actions(listing: Listing) -> str:
    buttons: list[str] = []
    if listing.phone_tel:
        buttons.append(
            f'<a href="{escape(listing.phone_tel)}" class="btn btn-primary btn-sm" '
            f'aria-label="Call {escape(listing.name)}">Call</a>'
        )
    if listing.website:
        buttons.append(_external_link(listing.website, "Website", "btn btn-muted btn-sm"))
    if listing.booking_url:
        buttons.append(_external_link(listing.booking_url, "Book online", "btn btn-outline btn-sm"))
    return f'<div class="actions">{"".join(buttons)}</div>'


def build_featured_card(listing: Listing, badges: Sequence[BadgeSpec]) -> str:
    verified = (
        '<span class="verified">Verified</span>'
        if listing.verified
        else '<span class="unverified">Unverified</span>'
    )
    sections = [
        _thumb(listing, "card-thumb"),
        '<div class="card-body">',
        f"<h3>{escape(listing.name)}</h3>",
    ]
    if listing.excerpt:
        sections.append(f'<p class="excerpt">{escape(listing.excerpt)}</p>')
    sections.append(f"{_price(listing)}<div class=\"status\">{verified}</div>")
    sections.append(build_badge_list(listing_badges(listing, badges)))
    sections.append(
        "<dl>"
        f"<dt>Area served</dt><dd>{escape(display_areas(listing.area_served))}</dd>"
        f"<dt>Contact</dt><dd>{_contact(listing)}</dd>"
        f"<dt>Booking</dt><dd>{_actions(listing)}</dd>"
        "</dl>"
    )
    if listing.services:
        services = " • ".join(listing.services[:MAX_CARD_SERVICES])
        sections.append(
            f'<p class="services"><strong>Popular tasks:</strong> {escape(services)}</p>'
        )
    if listing.notes:
        notes = "".join(f"<li>{escape(note)}</li>" for note in listing.notes)
        sections.append(f'<ul class="notes">{notes}</ul>')
    sections.append("</div>")
    return f'<article id="{escape(listing.slug)}" class="card card-featured">{"".join(sections)}</article>'


def build_listing_card(listing: Listing, badges: Sequence[BadgeSpec], index: int) -> str:
    """Compact card used in the "All listings" grid, numbered after the featured block."""
    css = "card card-compact card-featured" if listing.featured else "card card-compact"

    links: list[str] = []
    if listing.website:
        links.append(_external_link(listing.website, "Visit", "chip"))
    if listing.phone_tel:
        links.append(f'<a href="{escape(listing.phone_tel)}" class="chip">Call</a>')
    else:
        links.append('<span class="chip muted">No phone</span>')
    if listing.email:
        links.append(f'<a href="mailto:{escape(listing.email)}" class="chip">Email</a>')
    if listing.booking_url:
        links.append(_external_link(listing.booking_url, "Book", "chip"))

    excerpt = f'<p class="excerpt">{escape(listing.excerpt)}</p>' if listing.excerpt else ""
    return (
        f'<article id="{escape(listing.slug)}" class="{css}">'
        f'{_thumb(listing, "card-logo")}'
        '<div class="card-body">'
        f"<h3>{index}. {escape(listing.name)}</h3>"
        f"{excerpt}"
        f"{build_badge_list(listing_badges(listing, badges))}"
        f"{_price(listing)}"
        f'<div class="links">{"".join(links)}</div>'
        "</div></article>"
    )
