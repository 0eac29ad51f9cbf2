"""schema.org JSON-LD builders for directory pages.

Every builder returns a plain dict ready for ``json.dumps``. Keys whose value
is ``None`` are dropped so optional listing fields simply disappear from the
output instead of serialising as ``null``.
"""

from collections.abc import Sequence
from typing import Any

from saltaire_guide.schemas.content import Crumb, Faq, HowTo, SiteInfo
from saltaire_guide.schemas.directory import DirectoryCategory
from saltaire_guide.schemas.listings import Listing

SCHEMA_CONTEXT = "https://schema.org"
ITEM_LIST_UNORDERED = "https://schema.org/ItemListUnordered"
DEFAULT_AREA = "Saltaire"
PRICE_CURRENCY = "GBP"


def _compact(obj: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in obj.items() if v is not None}


def _absolute(site: SiteInfo, path: str) -> str:
    if path.startswith(("http://", "https://")):
        return path
    return f"{site.url}{path}"


def anchor_url(page_url: str, slug: str) -> str:
    return f"{page_url}#{slug}"


def website(site: SiteInfo) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "url": site.url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{site.url}/search?q={{query}}",
            "query-input": "required name=query",
        },
    }


def organization(site: SiteInfo) -> dict[str, Any]:
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": site.name,
        "url": site.url,
        "email": site.email,
    })


def web_page(
    site: SiteInfo,
    name: str,
    url: str,
    description: str | None = None,
    speakable: Sequence[str] = (),
) -> dict[str, Any]:
    page = _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "name": name,
        "url": url,
        "description": description,
        "inLanguage": site.locale,
        "isPartOf": {"@type": "WebSite", "url": site.url, "name": site.name},
    })
    if speakable:
        page["speakable"] = {"@type": "SpeakableSpecification", "cssSelector": list(speakable)}
    return page


def breadcrumb_list(site: SiteInfo, crumbs: Sequence[Crumb]) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": i,
                "name": crumb.name,
                "item": _absolute(site, crumb.path),
            }
            for i, crumb in enumerate(crumbs, start=1)
        ],
    }


def listing_items(page_url: str, listings: Sequence[Listing]) -> list[tuple[str, str, str | None]]:
    return [(l.name, anchor_url(page_url, l.slug), l.excerpt) for l in listings]


def item_list(name: str, items: Sequence[tuple[str, str, str | None]]) -> dict[str, Any]:
    """ItemList over (name, url, description) entries; positions are 1-based."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "name": name,
        "itemListOrder": ITEM_LIST_UNORDERED,
        "numberOfItems": len(items),
        "itemListElement": [
            _compact({
                "@type": "ListItem",
                "position": i,
                "name": item_name,
                "url": url,
                "description": description,
            })
            for i, (item_name, url, description) in enumerate(items, start=1)
        ],
    }


def faq_page(faqs: Sequence[Faq]) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.q,
                "acceptedAnswer": {"@type": "Answer", "text": faq.a},
            }
            for faq in faqs
        ],
    }


def how_to(guide: HowTo) -> dict[str, Any]:
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "HowTo",
        "name": guide.name,
        "totalTime": guide.total_time,
        "step": [{"@type": "HowToStep", "text": step} for step in guide.steps],
    })


def _camel(field: str) -> str:
    head, *rest = field.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _property(name: str, value: str) -> dict[str, str]:
    return {"@type": "PropertyValue", "name": name, "value": value}


def directory_entity(
    category: DirectoryCategory,
    listing: Listing,
    site: SiteInfo,
    page_url: str,
) -> dict[str, Any]:
    """Typed entity (Electrician, Locksmith, LocalBusiness...) for one listing."""
    properties = [_property("feature", t) for t in listing.tags]
    properties += [_property("accreditation", a) for a in listing.accreditations]
    for field, prop_name in category.ld_list_properties:
        properties += [_property(prop_name, v) for v in getattr(listing, field, None) or []]
    # string booleans, as published on the live pages
    properties += [
        _property(_camel(flag), "true" if getattr(listing, flag, False) else "false")
        for flag in category.ld_properties
    ]

    offers = None
    if category.offer_name and listing.price_from:
        offers = [{
            "@type": "Offer",
            "price": listing.price_from,
            "priceCurrency": PRICE_CURRENCY,
            "itemOffered": {"@type": "Service", "name": category.offer_name},
        }]

    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": category.entity_type,
        "name": listing.name,
        "url": anchor_url(page_url, listing.slug),
        "description": listing.excerpt,
        "areaServed": [
            {"@type": "Place", "name": area}
            for area in (listing.area_served or [DEFAULT_AREA])
        ],
        "telephone": listing.phone_tel.removeprefix("tel:") if listing.phone_tel else None,
        "email": listing.email,
        "image": _absolute(site, listing.image) if listing.image else None,
        "paymentAccepted": ", ".join(listing.payment) if listing.payment else None,
        "additionalProperty": properties or None,
        "makesOffer": offers,
    })


def directory_structured_data(
    category: DirectoryCategory,
    site: SiteInfo,
    crumbs: Sequence[Crumb],
    featured: Sequence[Listing],
) -> list[dict[str, Any]]:
    page_url = _absolute(site, category.path)
    blocks = [
        web_page(site, category.title, page_url, category.description, category.speakable),
        breadcrumb_list(site, crumbs),
        item_list(
            f"{category.label} serving Saltaire",
            listing_items(page_url, category.listings),
        ),
    ]
    blocks += [directory_entity(category, listing, site, page_url) for listing in featured]
    blocks += [how_to(guide) for guide in category.how_tos]
    if category.faqs:
        blocks.append(faq_page(category.faqs))
    return blocks
