from saltaire_guide.mappers.compare_table import (
    DASH,
    contact,
    joined,
    mapped,
    project_table,
    text,
    tiered,
    yes_dash,
    yes_no,
)
from saltaire_guide.schemas.directory import Column
from saltaire_guide.schemas.listings import LocksmithListing, TaxiListing, VetListing


def test_one_row_per_listing_in_input_order(abc_listings, sample_category):
    table = project_table(abc_listings, sample_category.columns)

    assert len(table.rows) == 3
    assert [r.slug for r in table.rows] == ["a", "b", "c"]
    assert [r.anchor for r in table.rows] == ["#a", "#b", "#c"]
    assert [r.featured for r in table.rows] == [True, False, True]


def test_headers_and_cells(abc_listings, sample_category):
    table = project_table(abc_listings, sample_category.columns)

    assert table.headers == ["Provider", "EICR", "Contact"]
    assert table.rows[0].cells == ["Yes", "Call"]
    assert table.rows[1].cells == [DASH, DASH]
    assert table.rows[2].cells == [DASH, "Call"]


def test_empty_listings():
    table = project_table([], [Column(header="Contact", value=contact())])
    assert table.headers == ["Provider", "Contact"]
    assert table.rows == []


def test_yes_dash_and_yes_no():
    listing = LocksmithListing(slug="x", name="X", emergency=True)
    assert yes_dash("emergency")(listing) == "Yes"
    assert yes_dash("auto")(listing) == DASH
    assert yes_no("auto")(listing) == "No"


def test_tiered_emergency_cover():
    column = tiered("available_24h", "emergency", "Daytime")

    assert column(LocksmithListing(slug="x", name="X", emergency=True, available_24h=True)) == "Yes"
    assert column(LocksmithListing(slug="x", name="X", emergency=True)) == "Daytime"
    assert column(LocksmithListing(slug="x", name="X", available_24h=True)) == DASH
    assert column(LocksmithListing(slug="x", name="X")) == DASH


def test_joined_with_limit():
    listing = LocksmithListing(slug="x", name="X", services=["One", "Two", "Three"])
    assert joined("services")(listing) == "One, Two, Three"
    assert joined("services", limit=2)(listing) == "One, Two"
    assert joined("payment")(listing) == DASH


def test_mapped_out_of_hours():
    column = mapped("out_of_hours", {"own": "Own", "partner": "Partner"})

    assert column(VetListing(slug="x", name="X", out_of_hours="own")) == "Own"
    assert column(VetListing(slug="x", name="X", out_of_hours="partner")) == "Partner"
    assert column(VetListing(slug="x", name="X")) == DASH
    assert column(LocksmithListing(slug="x", name="X")) == DASH


def test_text_cell():
    assert text("station_eta")(TaxiListing(slug="x", name="X", station_eta="5–10 min")) == "5–10 min"
    assert text("station_eta")(TaxiListing(slug="x", name="X")) == DASH
