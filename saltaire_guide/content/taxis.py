from saltaire_guide.mappers.compare_table import contact, joined, text
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import TaxiListing

LISTINGS = [
    TaxiListing(
        slug="saltaire-cars",
        name="Saltaire Cars",
        phone_local="01274 000000",
        phone_tel="tel:+441274000000",
        website="#",
        booking_url="#",
        excerpt=(
            "Local private hire covering Saltaire & Shipley. Station pickups, pre-book airport "
            "transfers, card accepted."
        ),
        price_from="Fares vary",
        station_eta="5–10 min typical",
        airports=["LBA", "MAN"],
        area_served=["Saltaire", "Shipley", "Baildon"],
        available_24h=True,
        featured=True,
        image="/images/whats-on.png",
        tags=["24/7", "airport", "card"],
        payment=["Card", "Cash", "Contactless"],
        fleet=["Saloon", "Estate", "MPV"],
        notes=["Request child seats in advance.", "Text when you arrive at the platform exit."],
    ),
    TaxiListing(
        slug="shipley-private-hire",
        name="Shipley Private Hire",
        phone_local="01274 111111",
        phone_tel="tel:+441274111111",
        website="#",
        booking_url="#",
        excerpt=(
            "Established firm near the station. Good fallback at busy times; pre-book recommended "
            "for late night."
        ),
        price_from="Metered / fixed by route",
        station_eta="4–8 min typical",
        airports=["LBA", "MAN", "EMA"],
        area_served=["Shipley", "Saltaire", "Frizinghall"],
        featured=True,
        image="/images/parking-saltaire.png",
        tags=["airport", "card"],
        payment=["Card", "Cash"],
        fleet=["Saloon", "Estate", "MPV", "Minibus (8)"],
        notes=["Minibus on request for groups.", "Ask for estate for luggage-heavy airport runs."],
    ),
    TaxiListing(
        slug="baildon-taxis",
        name="Baildon Taxis",
        website="#",
        excerpt="Covers Baildon, Saltaire fringe and Shipley. Best to pre-book at peak commute times.",
        price_from="Varies",
        station_eta="8–12 min typical",
        airports=["LBA"],
        area_served=["Baildon", "Saltaire"],
        image="/images/roberts-park.png",
        tags=["airport"],
        payment=["Cash"],
        fleet=["Saloon", "Estate"],
    ),
    TaxiListing(
        slug="aire-valley-cabs",
        name="Aire Valley Cabs",
        website="#",
        excerpt=(
            "Budget-friendly runs along the Aire Valley. Limited late-night availability; call ahead "
            "for groups."
        ),
        price_from="Budget fares",
        station_eta="10–15 min typical",
        airports=["LBA"],
        area_served=["Shipley", "Bingley", "Saltaire"],
        image="/images/saltaire-canal.png",
        tags=["budget"],
        payment=["Cash"],
        fleet=["Saloon"],
    ),
    TaxiListing(
        slug="heritage-travel",
        name="Heritage Travel (Private Hire)",
        website="#",
        excerpt=(
            "Pre-booked private hire for day trips & weddings. Not an on-demand taxi; request quotes "
            "in advance."
        ),
        price_from="By quote",
        station_eta="Pre-book only",
        airports=["MAN", "LPL"],
        area_served=["Saltaire", "Leeds Bradford", "Manchester"],
        image="/images/history-unesco.png",
        tags=["airport", "weddings"],
        payment=["Card", "Bank transfer"],
        fleet=["Executive saloon", "MPV"],
    ),
    TaxiListing(
        slug="canal-side-executive",
        name="Canal Side Executive Cars",
        website="#",
        excerpt=(
            "Executive transfers and business accounts. Suits early-morning airport pickups; pre-book "
            "essential."
        ),
        price_from="By quote",
        station_eta="Pre-book only",
        airports=["MAN", "LBA"],
        area_served=["Saltaire", "Leeds", "Manchester"],
        image="/images/salts-mill.png",
        tags=["executive", "airport", "account"],
        payment=["Card", "Invoice"],
        fleet=["Executive saloon", "Estate"],
    ),
]

FAQS = [
    Faq(
        q="Can I get a taxi at Saltaire station without booking?",
        a=(
            "There is no permanent rank; most pickups are pre-booked. Call on arrival and stand by "
            "the Victoria Road exit unless told otherwise."
        ),
    ),
    Faq(
        q="Do taxis take card in Saltaire?",
        a="Many do, but not all. Ask when booking or carry cash as a backup.",
    ),
    Faq(
        q="How far is Leeds Bradford Airport (LBA)?",
        a=(
            "Typically 25–40 minutes by car depending on traffic and pickup point. Allow extra time "
            "during peaks or poor weather."
        ),
    ),
    Faq(
        q="How many people can a taxi take?",
        a="Standard saloon seats up to 4. Ask for an estate/MPV/minibus for larger groups or extra luggage.",
    ),
    Faq(
        q="Is late-night availability limited?",
        a="Weekends and event nights can be busy. Pre-book and allow extra time.",
    ),
]

HOW_TOS = [
    HowTo(
        name="How to book a taxi quickly at Saltaire station",
        total_time="PT3M",
        steps=[
            "Call your chosen operator as your train approaches.",
            "Say “pickup Saltaire station, Victoria Road side”, and give passenger/luggage count.",
            "Confirm payment method and vehicle type (estate/MPV if needed).",
        ],
    ),
]

TAXIS = DirectoryCategory(
    slug="taxis",
    label="Taxis",
    title="Taxis in Saltaire",
    description=(
        "Local taxis & private hire serving Saltaire and Shipley: quick station pickups, airport "
        "transfers, late-night tips and trusted numbers."
    ),
    blurb="Station, airport, local runs.",
    group="Transport & Vehicles",
    entity_type="TaxiService",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="verified", label="Verified"),
        BadgeSpec(flag="available_24h", label="24/7"),
    ],
    columns=[
        Column(header="Station ETA", value=text("station_eta"), flags=["station_eta"]),
        Column(header="Airports", value=joined("airports"), flags=["airports"]),
        Column(header="Fleet", value=joined("fleet"), flags=["fleet"]),
        Column(header="Payment", value=joined("payment"), flags=["payment"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["available_24h"],
    ld_list_properties=[("airports", "airport"), ("fleet", "vehicle")],
    faqs=FAQS,
    how_tos=HOW_TOS,
    offer_name="Local journey",
    speakable=["#featured-title", "#guides-title"],
)
