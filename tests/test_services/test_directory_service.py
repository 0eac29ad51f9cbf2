import logging

import pytest

from saltaire_guide.exceptions.custom import CategoryNotFoundError, DirectoryConfigError
from saltaire_guide.mappers.compare_table import yes_dash
from saltaire_guide.schemas.content import Faq
from saltaire_guide.schemas.directory import BadgeSpec, Column
from saltaire_guide.schemas.listings import ElectricianListing
from saltaire_guide.services.directory import DirectoryService


def test_register_and_get(sample_category, site):
    service = DirectoryService(site, [sample_category])

    assert service.get("electricians") is sample_category
    assert service.categories() == [sample_category]
    assert service.groups() == {"Home & Trades": [sample_category]}


def test_unknown_category(sample_category, site):
    service = DirectoryService(site, [sample_category])

    with pytest.raises(CategoryNotFoundError) as exc_info:
        service.get("chimney-sweeps")
    assert exc_info.value.message == "Unknown directory category: chimney-sweeps"


def test_duplicate_category_rejected(sample_category, site):
    service = DirectoryService(site, [sample_category])
    with pytest.raises(DirectoryConfigError, match="registered twice"):
        service.register(sample_category)


def test_duplicate_listing_slug_rejected(sample_category, site):
    listings = [*sample_category.listings, ElectricianListing(slug="a", name="Another A")]
    category = sample_category.model_copy(update={"listings": listings})

    with pytest.raises(DirectoryConfigError, match="duplicate listing slug 'a'") as exc_info:
        DirectoryService(site, [category])
    assert exc_info.value.category == "electricians"


@pytest.mark.parametrize("slug", ["compare", "faq-title", "signup"])
def test_section_id_listing_slug_rejected(sample_category, site, slug):
    listings = [*sample_category.listings, ElectricianListing(slug=slug, name="Clashing")]
    category = sample_category.model_copy(update={"listings": listings})

    with pytest.raises(DirectoryConfigError, match=f"listing slug '{slug}' is a page section id"):
        DirectoryService(site, [category])


def test_register_accepts_question_with_trailing_space(sample_category, site):
    category = sample_category.model_copy(update={"faqs": [Faq(q="Do you do EICRs? ", a="Yes.")]})

    service = DirectoryService(site, [category])

    assert service.get("electricians").faqs[0].q == "Do you do EICRs? "


def test_unknown_badge_flag_rejected(sample_category, site):
    badges = [*sample_category.badges, BadgeSpec(flag="gas_safe", label="Gas Safe")]
    category = sample_category.model_copy(update={"badges": badges})

    with pytest.raises(DirectoryConfigError, match="gas_safe"):
        DirectoryService(site, [category])


def test_unknown_column_flag_rejected(sample_category, site):
    columns = [*sample_category.columns, Column(header="DBS", value=yes_dash("dbs"), flags=["dbs"])]
    category = sample_category.model_copy(update={"columns": columns})

    with pytest.raises(DirectoryConfigError, match="dbs"):
        DirectoryService(site, [category])


def test_unknown_ld_property_rejected(sample_category, site):
    category = sample_category.model_copy(update={"ld_list_properties": [("subjects", "subject")]})

    with pytest.raises(DirectoryConfigError, match="subjects"):
        DirectoryService(site, [category])


def test_build_view(sample_category, site):
    view = DirectoryService(site, [sample_category]).build_view("electricians")

    assert view.page_url == "https://saltaireguide.test/local-services/electricians"
    assert [l.slug for l in view.featured] == ["a", "c"]
    assert [l.slug for l in view.others] == ["b"]
    assert [c.name for c in view.crumbs] == ["Home", "Local services", "Electricians"]
    assert len(view.table.rows) == 3


def test_register_rejects_inconsistent_page(sample_category, site, monkeypatch):
    from saltaire_guide.mappers import page_builder

    def _drifted(view, site):
        return page_builder.build_directory_page(view, site).replace('<article id="a"', '<article id="alpha"')

    monkeypatch.setattr("saltaire_guide.services.directory.build_directory_page", _drifted)

    with pytest.raises(DirectoryConfigError, match="card #alpha has no ItemList entry"):
        DirectoryService(site, [sample_category])


def test_render_page_logs(sample_category, site, caplog):
    service = DirectoryService(site, [sample_category])

    with caplog.at_level(logging.INFO, logger="saltaire_guide.services.directory"):
        html = service.render_page("electricians")

    assert "<h1>Electricians in Saltaire</h1>" in html
    assert "Rendering electricians: 2 featured, 1 other listings" in caplog.text


def test_hub_structured_data(sample_category, site):
    blocks = DirectoryService(site, [sample_category]).hub_structured_data()

    assert [b["@type"] for b in blocks] == ["WebSite", "Organization", "WebPage", "BreadcrumbList", "ItemList"]
    items = blocks[-1]
    assert items["numberOfItems"] == 1
    assert items["itemListElement"][0] == {
        "@type": "ListItem",
        "position": 1,
        "name": "Electricians",
        "url": "https://saltaireguide.test/local-services/electricians",
        "description": "EICR, rewires.",
    }


def test_render_hub(sample_category, site):
    html = DirectoryService(site, [sample_category]).render_hub()
    assert '<a href="/local-services/electricians">' in html
    assert html.count("application/ld+json") == 5
