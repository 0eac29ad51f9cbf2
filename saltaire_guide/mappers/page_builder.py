import json
from collections.abc import Mapping, Sequence
from html import escape
from typing import Any

from saltaire_guide.mappers.card_builder import build_featured_card, build_listing_card
from saltaire_guide.schemas.content import Crumb, Faq, HowTo, SiteInfo
from saltaire_guide.schemas.directory import ComparisonTable, DirectoryCategory, DirectoryPageView

SECTION_IDS = ("featured", "listings", "compare", "guides", "faq", "signup")
# section ids and their heading ids; listing anchors must not collide with them
RESERVED_IDS = frozenset(SECTION_IDS) | {f"{section_id}-title" for section_id in SECTION_IDS}

ON_THIS_PAGE = (
    ("#featured", "Featured providers"),
    ("#listings", "All listings"),
    ("#compare", "Compare at a glance"),
    ("#guides", "Guides"),
    ("#faq", "FAQ"),
    ("#signup", "List your business"),
)


def build_json_ld(obj: Mapping[str, Any]) -> str:
    # "</" inside a string value would otherwise close the script element
    payload = json.dumps(obj, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/ld+json">{payload}</script>'


def build_breadcrumbs(crumbs: Sequence[Crumb]) -> str:
    items: list[str] = []
    for i, crumb in enumerate(crumbs):
        if i == len(crumbs) - 1:
            items.append(f'<li aria-current="page">{escape(crumb.name)}</li>')
        else:
            items.append(f'<li><a href="{escape(crumb.path)}">{escape(crumb.name)}</a></li>')
    return f'<nav aria-label="Breadcrumb"><ol class="breadcrumbs">{"".join(items)}</ol></nav>'


def build_compare_table(table: ComparisonTable) -> str:
    head = "".join(f"<th>{escape(h)}</th>" for h in table.headers)
    body: list[str] = []
    for row in table.rows:
        featured = '<div class="featured-flag">Featured</div>' if row.featured else ""
        cells = "".join(f"<td>{escape(cell)}</td>" for cell in row.cells)
        body.append(
            f'<tr data-slug="{escape(row.slug)}">'
            f'<td><a href="{escape(row.anchor)}">{escape(row.name)}</a>{featured}</td>'
            f"{cells}</tr>"
        )
    return (
        '<table class="table">'
        f"<thead><tr>{head}</tr></thead>"
        f'<tbody>{"".join(body)}</tbody>'
        "</table>"
    )


def build_faq(faqs: Sequence[Faq]) -> str:
    items = "".join(
        '<details class="faq-item">'
        f'<summary><span class="faq-num">Q{i}.</span> {escape(faq.q)}</summary>'
        f"<p>{escape(faq.a)}</p>"
        "</details>"
        for i, faq in enumerate(faqs, start=1)
    )
    return f'<div class="faq-list">{items}</div>'


def build_how_to(guide: HowTo) -> str:
    steps = "".join(f"<li>{escape(step)}</li>" for step in guide.steps)
    return f'<article class="card"><h3>{escape(guide.name)}</h3><ol>{steps}</ol></article>'


def _section(section_id: str, title: str, body: str, intro: str = "") -> str:
    intro_html = f"<p>{escape(intro)}</p>" if intro else ""
    return (
        f'<section id="{section_id}" aria-labelledby="{section_id}-title">'
        f'<h2 id="{section_id}-title">{escape(title)}</h2>'
        f"{intro_html}{body}</section>"
    )


def _document(site: SiteInfo, title: str, description: str, canonical: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        f'<html lang="{escape(site.locale)}">'
        "<head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(title)} | {escape(site.name)}</title>"
        f'<meta name="description" content="{escape(description)}">'
        f'<link rel="canonical" href="{escape(canonical)}">'
        f'<meta property="og:title" content="{escape(title)}">'
        f'<meta property="og:url" content="{escape(canonical)}">'
        "</head>"
        f"<body>{body}</body>"
        "</html>"
    )


def _on_this_page() -> str:
    links = "".join(f'<li><a href="{href}">{escape(label)}</a></li>' for href, label in ON_THIS_PAGE)
    return f'<nav aria-label="On this page" class="toc"><ul>{links}</ul></nav>'


def _signup(site: SiteInfo, category: DirectoryCategory) -> str:
    body = (
        f'<form method="post" action="/api/listings" class="signup-form">'
        f'<input type="hidden" name="category" value="{escape(category.slug)}">'
        '<label>Business name <input name="business" required></label>'
        '<label>Email <input name="email" type="email" required></label>'
        '<input name="hp" class="hp" tabindex="-1" autocomplete="off">'
        '<button type="submit" class="btn btn-primary">Send</button>'
        "</form>"
    )
    if site.email:
        body += f'<p>Or email <a href="mailto:{escape(site.email)}">{escape(site.email)}</a>.</p>'
    return _section(
        "signup",
        f"List your {category.label.lower()} business",
        body,
        "Free basic listings for local providers. Featured placement highlights verified contact details.",
    )


def build_directory_page(view: DirectoryPageView, site: SiteInfo) -> str:
    category = view.category
    featured_count = len(view.featured)

    featured_cards = "".join(build_featured_card(l, category.badges) for l in view.featured)
    if not featured_cards:
        featured_cards = (
            f'<p class="empty">No featured {escape(category.label.lower())} yet. '
            "Owners can request a featured slot below.</p>"
        )
    listing_cards = "".join(
        build_listing_card(l, category.badges, i)
        for i, l in enumerate(view.others, start=featured_count + 1)
    )

    parts = [
        build_breadcrumbs(view.crumbs),
        f'<header class="hero"><h1>{escape(category.title)}</h1>'
        f"<p>{escape(category.description)}</p></header>",
        _on_this_page(),
        _section(
            "featured",
            f"Featured {category.label.lower()} (quick to contact)",
            f'<div class="grid">{featured_cards}</div>',
        ),
        _section(
            "listings",
            "All listings (Saltaire & nearby)",
            f'<div class="grid">{listing_cards}</div>',
        ),
        _section(
            "compare",
            "Compare at a glance",
            build_compare_table(view.table),
            "Capabilities and prices change — confirm when booking.",
        ),
    ]
    if category.how_tos:
        parts.append(_section("guides", "Guides", "".join(build_how_to(g) for g in category.how_tos)))
    if category.faqs:
        parts.append(_section("faq", "Frequently asked questions", build_faq(category.faqs)))
    parts.append(_signup(site, category))
    parts.extend(build_json_ld(block) for block in view.structured_data)

    return _document(site, category.title, category.description, view.page_url, f"<main>{''.join(parts)}</main>")


def build_hub_page(groups: Mapping[str, Sequence[DirectoryCategory]], site: SiteInfo, json_ld: Sequence[Mapping[str, Any]] = ()) -> str:
    sections: list[str] = []
    for group, categories in groups.items():
        cards = "".join(
            f'<li><a href="{escape(c.path)}"><strong>{escape(c.label)}</strong></a>'
            f"<span>{escape(c.blurb)}</span></li>"
            for c in categories
        )
        sections.append(f'<section class="hub-group"><h2>{escape(group)}</h2><ul>{cards}</ul></section>')

    title = "Local services in Saltaire & Shipley"
    description = "Trusted local services directory for Saltaire & Shipley. Featured providers are highlighted and verified when possible."
    body = (
        build_breadcrumbs([Crumb(name="Home", path="/"), Crumb(name="Local services", path="/local-services")])
        + f'<header class="hero"><h1>{escape(title)}</h1><p>{escape(description)}</p></header>'
        + "".join(sections)
        + "".join(build_json_ld(block) for block in json_ld)
    )
    return _document(site, title, description, f"{site.url}/local-services", f"<main>{body}</main>")
