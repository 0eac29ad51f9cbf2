import httpx
import pytest
from httpx import ASGITransport

from saltaire_guide.mappers.compare_table import contact, yes_dash
from saltaire_guide.schemas.content import Faq, HowTo, SiteInfo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import ElectricianListing

SITE_URL = "https://saltaireguide.test"


@pytest.fixture
def signups_file(tmp_path):
    return tmp_path / "data" / "signups.json"


@pytest.fixture
def mock_env(monkeypatch, signups_file):
    monkeypatch.setenv("SITE_URL", f"{SITE_URL}/")
    monkeypatch.setenv("SIGNUPS_FILE", str(signups_file))
    monkeypatch.setenv("LISTING_WEBHOOK_URL", "")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
async def client(mock_env):
    from saltaire_guide.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
def site():
    return SiteInfo(name="Saltaire Guide", url=SITE_URL, email="hello@saltaireguide.test")


@pytest.fixture
def abc_listings():
    """a and c featured, b not; b has no phone, price or area."""
    return [
        ElectricianListing(
            slug="a",
            name="Alpha Electrical",
            phone_local="01274 000001",
            phone_tel="tel:+441274000001",
            excerpt="Fault finding and EICRs.",
            emergency=True,
            eicr=True,
            featured=True,
            verified=True,
            area_served=["Saltaire", "Shipley"],
            tags=["Emergency"],
            accreditations=["NICEIC"],
            services=["EICR", "Sockets"],
            payment=["Card"],
        ),
        ElectricianListing(slug="b", name="Beta Sparks"),
        ElectricianListing(
            slug="c",
            name="Charlie & Sons",
            phone_tel="tel:+441274000003",
            price_from="£60",
            ev_qualified=True,
            featured=True,
            image="/images/c.png",
        ),
    ]


@pytest.fixture
def sample_category(abc_listings):
    return DirectoryCategory(
        slug="electricians",
        label="Electricians",
        title="Electricians in Saltaire",
        description="Local electricians for EICRs and repairs.",
        blurb="EICR, rewires.",
        entity_type="Electrician",
        listings=abc_listings,
        badges=[
            BadgeSpec(flag="emergency", label="Emergency"),
            BadgeSpec(flag="eicr", label="EICR"),
            BadgeSpec(flag="ev_qualified", label="EV charger"),
        ],
        columns=[
            Column(header="EICR", value=yes_dash("eicr"), flags=["eicr"]),
            Column(header="Contact", value=contact()),
        ],
        ld_properties=["emergency", "ev_qualified"],
        faqs=[
            Faq(q="Do you issue EICRs?", a="Yes, with a written report."),
            Faq(q="Can you fit <b>smart</b> switches?", a="Most can </script> ask first."),
        ],
        how_tos=[
            HowTo(name="How to reset a tripped RCD", total_time="PT2M", steps=["Unplug.", "Reset."]),
        ],
        offer_name="Call-out",
    )
