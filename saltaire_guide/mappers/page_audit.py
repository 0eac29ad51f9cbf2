"""Consistency checks over a rendered directory page.

The visible cards and the JSON-LD blocks are built from the same listings, but
they are emitted by different builders. These checks read the final HTML back
so any drift between the two shows up at registration time.
"""

import json
from collections import Counter
from typing import Any

from bs4 import BeautifulSoup


def extract_json_ld(soup: BeautifulSoup) -> list[dict[str, Any]]:
    return [
        json.loads(script.string or "{}")
        for script in soup.find_all("script", type="application/ld+json")
    ]


def card_anchors(soup: BeautifulSoup) -> list[str]:
    return [article["id"] for article in soup.find_all("article", id=True)]


def visible_faqs(soup: BeautifulSoup) -> list[tuple[str, str]]:
    faqs: list[tuple[str, str]] = []
    for item in soup.select("details.faq-item"):
        number = item.summary.find("span", class_="faq-num")
        if number is not None:
            number.extract()
        # drop only the space after the number
        faqs.append((item.summary.get_text().removeprefix(" "), item.p.get_text()))
    return faqs


def _anchor_problems(anchors: list[str], blocks: list[dict[str, Any]], page_url: str) -> list[str]:
    item_lists = [b for b in blocks if b.get("@type") == "ItemList"]
    if not item_lists:
        return ["no ItemList block"]
    item_urls = [item.get("url", "") for item in item_lists[0].get("itemListElement", [])]

    problems = [
        f"card #{slug} has no ItemList entry"
        for slug in anchors
        if f"{page_url}#{slug}" not in item_urls
    ]
    expected = {f"{page_url}#{slug}" for slug in anchors}
    problems += [f"ItemList entry {url} has no card" for url in item_urls if url not in expected]
    return problems


def _duplicate_ids(soup: BeautifulSoup) -> list[str]:
    counts = Counter(tag["id"] for tag in soup.find_all(id=True))
    return [f"duplicate id '{element_id}'" for element_id, n in counts.items() if n > 1]


def _faq_problems(faqs: list[tuple[str, str]], blocks: list[dict[str, Any]]) -> list[str]:
    faq_pages = [b for b in blocks if b.get("@type") == "FAQPage"]
    if not faq_pages:
        return ["visible FAQ without FAQPage block"] if faqs else []

    questions = [
        (q.get("name", ""), q.get("acceptedAnswer", {}).get("text", ""))
        for q in faq_pages[0].get("mainEntity", [])
    ]
    if len(questions) != len(faqs):
        return [f"{len(faqs)} visible FAQs but {len(questions)} FAQPage questions"]
    return [
        f"FAQ {i} differs from FAQPage question"
        for i, (shown, published) in enumerate(zip(faqs, questions), start=1)
        if shown != published
    ]


def audit_directory_page(html: str, page_url: str) -> list[str]:
    """Problems found in a rendered page; an empty list means it is consistent."""
    soup = BeautifulSoup(html, "html.parser")
    blocks = extract_json_ld(soup)
    return (
        _duplicate_ids(soup)
        + _anchor_problems(card_anchors(soup), blocks, page_url)
        + _faq_problems(visible_faqs(soup), blocks)
    )
