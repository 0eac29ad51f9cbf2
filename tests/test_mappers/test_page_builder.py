import json
from html import escape

from bs4 import BeautifulSoup

from saltaire_guide.mappers.page_audit import card_anchors, extract_json_ld
from saltaire_guide.mappers.page_builder import (
    build_breadcrumbs,
    build_directory_page,
    build_faq,
    build_hub_page,
    build_json_ld,
)
from saltaire_guide.schemas.content import Crumb, Faq
from saltaire_guide.services.directory import DirectoryService


def _json_ld_blocks(html):
    return extract_json_ld(BeautifulSoup(html, "html.parser"))


def test_json_ld_cannot_close_script():
    html = build_json_ld({"text": "a </script><script>alert(1)</script>"})

    assert html.count("</script>") == 1
    assert html.endswith("</script>")
    payload = html.removeprefix('<script type="application/ld+json">').removesuffix("</script>")
    assert json.loads(payload) == {"text": "a </script><script>alert(1)</script>"}


def test_json_ld_keeps_unicode():
    assert "£60 • 24/7" in build_json_ld({"price": "£60 • 24/7"})


def test_breadcrumbs_mark_current_page():
    html = build_breadcrumbs([Crumb(name="Home", path="/"), Crumb(name="Plumbers", path="/local-services/plumbers")])
    assert '<li><a href="/">Home</a></li>' in html
    assert '<li aria-current="page">Plumbers</li>' in html


def test_faq_numbering():
    html = build_faq([Faq(q="One?", a="1"), Faq(q="Two?", a="2")])
    assert html.count('class="faq-item"') == 2
    assert '<span class="faq-num">Q2.</span> Two?' in html


def test_directory_page(sample_category, site):
    service = DirectoryService(site, [sample_category])
    view = service.build_view("electricians")

    html = build_directory_page(view, site)

    assert html.startswith("<!DOCTYPE html>")
    assert '<link rel="canonical" href="https://saltaireguide.test/local-services/electricians">' in html
    # featured cards first, then the rest numbered after them
    assert html.index('id="a"') < html.index('id="c"') < html.index('id="b"')
    assert "<h3>3. Beta Sparks</h3>" in html
    rows = BeautifulSoup(html, "html.parser").select("tr[data-slug]")
    assert [r["data-slug"] for r in rows] == ["a", "b", "c"]
    assert '<h2 id="faq-title">' in html
    assert 'action="/api/listings"' in html
    assert '<input type="hidden" name="category" value="electricians">' in html


def test_directory_page_faq_matches_json_ld(sample_category, site):
    view = DirectoryService(site, [sample_category]).build_view("electricians")
    html = build_directory_page(view, site)

    (faq_page,) = [b for b in _json_ld_blocks(html) if b["@type"] == "FAQPage"]
    assert html.count('class="faq-item"') == len(faq_page["mainEntity"])
    for faq, question in zip(sample_category.faqs, faq_page["mainEntity"]):
        assert question["name"] == faq.q
        assert question["acceptedAnswer"]["text"] == faq.a
        assert escape(faq.q) in html


def test_directory_page_anchors_match_item_list(sample_category, site):
    view = DirectoryService(site, [sample_category]).build_view("electricians")
    html = build_directory_page(view, site)

    card_ids = card_anchors(BeautifulSoup(html, "html.parser"))
    (items,) = [b for b in _json_ld_blocks(html) if b["@type"] == "ItemList"]
    item_slugs = [e["url"].rsplit("#", 1)[1] for e in items["itemListElement"]]
    assert sorted(card_ids) == sorted(item_slugs)


def test_hub_page_groups(sample_category, site):
    html = build_hub_page({"Home & Trades": [sample_category]}, site)
    assert "<h2>Home &amp; Trades</h2>" in html
    assert '<a href="/local-services/electricians"><strong>Electricians</strong></a>' in html
    assert "application/ld+json" not in html
