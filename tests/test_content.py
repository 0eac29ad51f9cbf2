"""Checks every shipped directory category renders consistently."""

from html import escape

import pytest
from bs4 import BeautifulSoup

from saltaire_guide.content.registry import CATEGORIES
from saltaire_guide.mappers.badges import listing_badges
from saltaire_guide.mappers.page_audit import audit_directory_page, card_anchors, extract_json_ld
from saltaire_guide.mappers.partition import partition_listings
from saltaire_guide.services.directory import DirectoryService

CATEGORY_IDS = [c.slug for c in CATEGORIES]


@pytest.fixture
def service(site):
    return DirectoryService(site, CATEGORIES)


def _json_ld_blocks(html):
    return extract_json_ld(BeautifulSoup(html, "html.parser"))


def test_category_slugs_unique():
    assert len(CATEGORY_IDS) == len(set(CATEGORY_IDS))


@pytest.mark.parametrize("category", CATEGORIES, ids=CATEGORY_IDS)
def test_listing_slugs_unique(category):
    slugs = [l.slug for l in category.listings]
    assert len(slugs) == len(set(slugs))


@pytest.mark.parametrize("category", CATEGORIES, ids=CATEGORY_IDS)
def test_partition_complete(category):
    featured, others = partition_listings(category.listings)
    assert sorted(l.slug for l in featured + others) == sorted(l.slug for l in category.listings)


@pytest.mark.parametrize("slug", CATEGORY_IDS)
def test_anchors_match_json_ld(service, slug):
    view = service.build_view(slug)
    html = service.render_page(slug)
    assert audit_directory_page(html, view.page_url) == []

    card_ids = card_anchors(BeautifulSoup(html, "html.parser"))
    assert card_ids == [l.slug for l in view.featured + view.others]

    (items,) = [b for b in _json_ld_blocks(html) if b["@type"] == "ItemList"]
    assert [e["url"] for e in items["itemListElement"]] == [
        f"{view.page_url}#{l.slug}" for l in view.category.listings
    ]
    assert [e["position"] for e in items["itemListElement"]] == list(range(1, len(view.category.listings) + 1))


@pytest.mark.parametrize("slug", CATEGORY_IDS)
def test_table_has_row_per_listing(service, slug):
    view = service.build_view(slug)
    assert [r.slug for r in view.table.rows] == [l.slug for l in view.category.listings]
    assert all(len(r.cells) == len(view.category.columns) for r in view.table.rows)


@pytest.mark.parametrize("slug", CATEGORY_IDS)
def test_faq_mirrors_json_ld(service, slug):
    category = service.get(slug)
    html = service.render_page(slug)

    (faq,) = [b for b in _json_ld_blocks(html) if b["@type"] == "FAQPage"]
    assert html.count('class="faq-item"') == len(faq["mainEntity"]) == len(category.faqs)
    assert [(q["name"], q["acceptedAnswer"]["text"]) for q in faq["mainEntity"]] == [
        (f.q, f.a) for f in category.faqs
    ]
    for f in category.faqs:
        assert escape(f.q) in html
        assert escape(f.a) in html


@pytest.mark.parametrize("category", CATEGORIES, ids=CATEGORY_IDS)
def test_badges_deterministic(category):
    for listing in category.listings:
        assert listing_badges(listing, category.badges) == listing_badges(listing, category.badges)


@pytest.mark.parametrize("slug", CATEGORY_IDS)
def test_featured_entities_typed(service, slug):
    view = service.build_view(slug)
    entities = [b for b in view.structured_data if b["@type"] == view.category.entity_type]
    assert [e["url"] for e in entities] == [f"{view.page_url}#{l.slug}" for l in view.featured]


def test_vet_out_of_hours_column(service):
    view = service.build_view("vets")
    column = view.table.headers.index("Out-of-hours") - 1

    cells = {r.slug: r.cells[column] for r in view.table.rows}
    assert cells["vets-now-leeds"] == "Own"
    assert cells["vets4pets-bingley"] == "Partner"
    assert cells["rcvs-find-a-vet"] == "Check"
