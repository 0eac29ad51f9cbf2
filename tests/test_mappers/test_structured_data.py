from saltaire_guide.mappers.structured_data import (
    anchor_url,
    breadcrumb_list,
    directory_entity,
    directory_structured_data,
    faq_page,
    how_to,
    item_list,
    listing_items,
    organization,
    web_page,
)
from saltaire_guide.schemas.content import Crumb, HowTo, SiteInfo

PAGE_URL = "https://saltaireguide.test/local-services/electricians"


def _by_type(blocks, type_):
    return [b for b in blocks if b["@type"] == type_]


def test_item_list_positions_and_urls(abc_listings):
    block = item_list("Electricians serving Saltaire", listing_items(PAGE_URL, abc_listings))

    assert block["numberOfItems"] == 3
    assert [e["position"] for e in block["itemListElement"]] == [1, 2, 3]
    assert [e["url"] for e in block["itemListElement"]] == [
        f"{PAGE_URL}#a",
        f"{PAGE_URL}#b",
        f"{PAGE_URL}#c",
    ]
    assert [e["name"] for e in block["itemListElement"]] == ["Alpha Electrical", "Beta Sparks", "Charlie & Sons"]


def test_item_list_drops_missing_description(abc_listings):
    block = item_list("x", listing_items(PAGE_URL, abc_listings))
    assert block["itemListElement"][0]["description"] == "Fault finding and EICRs."
    assert "description" not in block["itemListElement"][1]


def test_anchor_url():
    assert anchor_url(PAGE_URL, "shipley-sparks") == f"{PAGE_URL}#shipley-sparks"


def test_entity_for_featured_listing(sample_category, abc_listings, site):
    entity = directory_entity(sample_category, abc_listings[0], site, PAGE_URL)

    assert entity["@type"] == "Electrician"
    assert entity["url"] == f"{PAGE_URL}#a"
    assert entity["telephone"] == "+441274000001"
    assert entity["paymentAccepted"] == "Card"
    assert entity["areaServed"] == [
        {"@type": "Place", "name": "Saltaire"},
        {"@type": "Place", "name": "Shipley"},
    ]
    assert entity["additionalProperty"] == [
        {"@type": "PropertyValue", "name": "feature", "value": "Emergency"},
        {"@type": "PropertyValue", "name": "accreditation", "value": "NICEIC"},
        {"@type": "PropertyValue", "name": "emergency", "value": "true"},
        {"@type": "PropertyValue", "name": "evQualified", "value": "false"},
    ]
    # no price, no offer
    assert "makesOffer" not in entity


def test_entity_defaults_and_offer(sample_category, abc_listings, site):
    entity = directory_entity(sample_category, abc_listings[2], site, PAGE_URL)

    assert entity["areaServed"] == [{"@type": "Place", "name": "Saltaire"}]
    assert entity["image"] == "https://saltaireguide.test/images/c.png"
    assert "description" not in entity
    assert "email" not in entity
    assert entity["makesOffer"] == [{
        "@type": "Offer",
        "price": "£60",
        "priceCurrency": "GBP",
        "itemOffered": {"@type": "Service", "name": "Call-out"},
    }]


def test_entity_list_properties(sample_category, site):
    from saltaire_guide.schemas.listings import TutorListing

    category = sample_category.model_copy(update={
        "ld_properties": ["online"],
        "ld_list_properties": [("exam_boards", "examBoard")],
    })
    listing = TutorListing(slug="t", name="Tutor", online=True, exam_boards=["AQA", "OCR"])

    props = directory_entity(category, listing, site, PAGE_URL)["additionalProperty"]

    assert props == [
        {"@type": "PropertyValue", "name": "examBoard", "value": "AQA"},
        {"@type": "PropertyValue", "name": "examBoard", "value": "OCR"},
        {"@type": "PropertyValue", "name": "online", "value": "true"},
    ]


def test_directory_structured_data_blocks(sample_category, abc_listings, site):
    featured = [abc_listings[0], abc_listings[2]]
    crumbs = [Crumb(name="Home", path="/"), Crumb(name="Electricians", path=sample_category.path)]

    blocks = directory_structured_data(sample_category, site, crumbs, featured)

    assert [b["@type"] for b in blocks] == [
        "WebPage",
        "BreadcrumbList",
        "ItemList",
        "Electrician",
        "Electrician",
        "HowTo",
        "FAQPage",
    ]
    assert blocks[0]["url"] == PAGE_URL
    assert blocks[2]["name"] == "Electricians serving Saltaire"
    assert [e["url"] for e in blocks[3:5]] == [f"{PAGE_URL}#a", f"{PAGE_URL}#c"]
    assert all(b["@context"] == "https://schema.org" for b in blocks)


def test_faq_page_mirrors_faqs(sample_category, abc_listings, site):
    blocks = directory_structured_data(sample_category, site, [], abc_listings[:1])
    (faq,) = _by_type(blocks, "FAQPage")

    assert len(faq["mainEntity"]) == len(sample_category.faqs)
    assert [(q["name"], q["acceptedAnswer"]["text"]) for q in faq["mainEntity"]] == [
        (f.q, f.a) for f in sample_category.faqs
    ]


def test_no_faq_page_without_faqs(sample_category, site):
    category = sample_category.model_copy(update={"faqs": []})
    blocks = directory_structured_data(category, site, [], [])
    assert _by_type(blocks, "FAQPage") == []
    assert faq_page([])["mainEntity"] == []


def test_breadcrumbs_are_absolute(site):
    block = breadcrumb_list(site, [Crumb(name="Home", path="/"), Crumb(name="Local services", path="/local-services")])
    assert [e["item"] for e in block["itemListElement"]] == [
        "https://saltaireguide.test/",
        "https://saltaireguide.test/local-services",
    ]
    assert [e["position"] for e in block["itemListElement"]] == [1, 2]


def test_how_to_without_total_time():
    block = how_to(HowTo(name="Book a sitter", steps=["Message.", "Confirm."]))
    assert "totalTime" not in block
    assert block["step"] == [
        {"@type": "HowToStep", "text": "Message."},
        {"@type": "HowToStep", "text": "Confirm."},
    ]


def test_web_page_speakable(site):
    page = web_page(site, "Plumbers", PAGE_URL, speakable=["#faq-title"])
    assert page["speakable"] == {"@type": "SpeakableSpecification", "cssSelector": ["#faq-title"]}
    assert "description" not in page
    assert page["inLanguage"] == "en-GB"


def test_organization_without_email():
    org = organization(SiteInfo(name="Saltaire Guide", url="https://saltaireguide.test"))
    assert "email" not in org
