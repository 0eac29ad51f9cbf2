from saltaire_guide.mappers.badges import capability_badges, listing_badges
from saltaire_guide.schemas.directory import BadgeSpec
from saltaire_guide.schemas.listings import ElectricianListing, Listing

BADGES = [
    BadgeSpec(flag="eicr", label="EICR"),
    BadgeSpec(flag="emergency", label="Emergency"),
    BadgeSpec(flag="ev_qualified", label="EV charger"),
]


def test_capability_badges_follow_declared_order():
    listing = ElectricianListing(slug="x", name="X", ev_qualified=True, eicr=True)
    assert capability_badges(listing, BADGES) == ["EICR", "EV charger"]


def test_no_flags_no_badges():
    listing = ElectricianListing(slug="x", name="X")
    assert capability_badges(listing, BADGES) == []
    assert listing_badges(listing, BADGES) == []


def test_flag_missing_on_listing_type_is_false():
    listing = Listing(slug="x", name="X", emergency=True)
    assert capability_badges(listing, BADGES) == ["Emergency"]


def test_listing_badges_order_and_dedup():
    listing = ElectricianListing(
        slug="x",
        name="X",
        emergency=True,
        eicr=True,
        tags=["Emergency", "Card"],
        accreditations=["NICEIC", "Card"],
    )
    assert listing_badges(listing, BADGES) == ["Emergency", "Card", "NICEIC", "EICR"]


def test_badges_are_deterministic(abc_listings):
    for listing in abc_listings:
        assert listing_badges(listing, BADGES) == listing_badges(listing, BADGES)
        assert capability_badges(listing, BADGES) == capability_badges(listing, BADGES)
