"""Electricians: emergency faults, EICR, consumer units, lighting and EV chargers.

Placeholder listings; replace with verified details as providers are onboarded.
"""

from saltaire_guide.mappers.compare_table import contact, joined, tiered, yes_dash
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import ElectricianListing

LISTINGS = [
    ElectricianListing(
        slug="saltaire-electrical",
        name="Saltaire Electrical & EICR",
        phone_local="01274 000450",
        phone_tel="tel:+441274000450",
        website="#",
        booking_url="#",
        excerpt=(
            "Fault-finding, EICR for landlords/homebuyers, consumer unit upgrades, "
            "lighting & sockets. Same-day where possible."
        ),
        price_from="Call for estimate",
        emergency=True,
        available_24h=True,
        accreditations=["NICEIC", "Part P"],
        ev_qualified=True,
        eicr=True,
        landlord=True,
        rewires=True,
        lighting=True,
        consumer_units=True,
        area_served=["Saltaire", "Shipley", "Baildon"],
        featured=True,
        image="/images/whats-on.png",
        tags=["Emergency", "EICR", "EV", "Card accepted"],
        services=["Fault finding", "EICR", "Consumer units", "EV chargers", "Lighting", "Sockets"],
        payment=["Card", "Bank transfer", "Contactless"],
        notes=["Can coordinate access with letting agents for EICR."],
    ),
    ElectricianListing(
        slug="shipley-sparks",
        name="Shipley Sparks (Emergency)",
        phone_local="01274 000480",
        phone_tel="tel:+441274000480",
        website="#",
        booking_url="#",
        excerpt=(
            "Rapid-response team for tripping RCDs, dead circuits and urgent faults. "
            "Good coverage in evenings/weekends."
        ),
        price_from="Transparent call-out on booking",
        emergency=True,
        available_24h=True,
        accreditations=["NAPIT", "Part P"],
        eicr=True,
        landlord=True,
        lighting=True,
        consumer_units=True,
        area_served=["Shipley", "Saltaire", "Frizinghall"],
        featured=True,
        image="/images/plan-your-visit.png",
        tags=["24/7", "Emergency", "Card accepted"],
        services=["Emergency faults", "Consumer units", "EICR", "Lighting"],
        payment=["Card", "Cash"],
        notes=["Phone best for urgent jobs."],
    ),
    ElectricianListing(
        slug="baildon-lighting",
        name="Baildon Lighting & Small Works",
        website="#",
        excerpt=(
            "Lighting upgrades, additional sockets and small works by appointment. "
            "Not a 24/7 emergency service."
        ),
        price_from="By quote",
        accreditations=["Part P"],
        lighting=True,
        area_served=["Baildon", "Saltaire", "Shipley"],
        image="/images/roberts-park.png",
        tags=["Lighting", "Small works"],
        services=["Lighting upgrades", "Sockets"],
        payment=["Bank transfer", "Card"],
    ),
    ElectricianListing(
        slug="aire-valley-ev",
        name="Aire Valley EV & Power",
        website="#",
        excerpt=(
            "EV charger installation (home), circuit additions and load assessment. "
            "Site survey required."
        ),
        price_from="By quote",
        accreditations=["NICEIC"],
        ev_qualified=True,
        consumer_units=True,
        area_served=["Shipley", "Bingley", "Saltaire"],
        image="/images/saltaire-canal.png",
        tags=["EV chargers", "Load assessment"],
        services=["EV chargers", "Consumer units (assessment)"],
        payment=["Card", "Bank transfer"],
    ),
    ElectricianListing(
        slug="heritage-rewire",
        name="Heritage Rewire (Terraces)",
        website="#",
        excerpt=(
            "Terrace-friendly rewires and sympathetic routing. Not for emergency faults. "
            "Weekday surveys only."
        ),
        price_from="By quote",
        accreditations=["NAPIT"],
        eicr=True,
        landlord=True,
        rewires=True,
        lighting=True,
        consumer_units=True,
        area_served=["Saltaire", "Shipley", "Leeds fringe"],
        image="/images/history-unesco.png",
        tags=["Rewires", "EICR", "Consumer units"],
        services=["Rewires", "EICR", "Consumer units", "Lighting"],
        payment=["Card", "Bank transfer"],
    ),
]

FAQS = [
    Faq(
        q="Do electricians in Saltaire offer 24/7 emergency callout?",
        a=(
            "Some do; availability varies. Call featured providers first and describe symptoms "
            "clearly. If unsafe (smell of burning/smoke), keep clear and call for help."
        ),
    ),
    Faq(
        q="What is an EICR and do I need one?",
        a=(
            "An Electrical Installation Condition Report is a routine inspection of your wiring "
            "and consumer unit. Landlords typically require it on a schedule; homebuyers often "
            "request one for peace of mind."
        ),
    ),
    Faq(
        q="Can I reset a tripped RCD myself?",
        a=(
            "If safe, you may attempt a single reset. If it immediately trips again, do not keep "
            "resetting — unplug suspect appliances and call a professional."
        ),
    ),
    Faq(
        q="Do electricians install EV chargers?",
        a=(
            "Many do. A site survey checks load capacity and the best placement. Expect dedicated "
            "circuits and protective devices per current standards."
        ),
    ),
    Faq(
        q="Do providers take card?",
        a="Many accept card or bank transfer. Confirm on booking and request an invoice/receipt.",
    ),
]

HOW_TOS = [
    HowTo(
        name="How to respond to a tripping RCD safely (non-technical)",
        total_time="PT2M",
        steps=[
            "Unplug any appliance that seemed to cause the trip and leave it unplugged.",
            "Check whether a wider power cut is affecting your area (ask a neighbour or check official sources).",
            "If safe, you may attempt a single reset on the RCD/breaker without opening any covers. "
            "If it trips again, stop and call a qualified electrician.",
            "If you smell burning or see smoke, keep clear and call for help.",
        ],
    ),
]

ELECTRICIANS = DirectoryCategory(
    slug="electricians",
    label="Electricians",
    title="Electricians in Saltaire",
    description=(
        "Local electricians for emergency faults, EICR, consumer unit upgrades, lighting and "
        "EV chargers. Featured providers with instant contact and a practical emergency checklist."
    ),
    blurb="EICR, rewires, sockets, lighting.",
    entity_type="Electrician",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="emergency", label="Emergency"),
        BadgeSpec(flag="available_24h", label="24/7"),
        BadgeSpec(flag="eicr", label="EICR"),
        BadgeSpec(flag="consumer_units", label="Consumer units"),
        BadgeSpec(flag="ev_qualified", label="EV"),
        BadgeSpec(flag="lighting", label="Lighting"),
        BadgeSpec(flag="rewires", label="Rewires"),
    ],
    columns=[
        Column(
            header="24/7 Emergency",
            value=tiered("available_24h", "emergency", "Daytime"),
            flags=["available_24h", "emergency"],
        ),
        Column(header="EICR", value=yes_dash("eicr"), flags=["eicr"]),
        Column(header="Consumer units", value=yes_dash("consumer_units"), flags=["consumer_units"]),
        Column(header="EV chargers", value=yes_dash("ev_qualified"), flags=["ev_qualified"]),
        Column(header="Typical services", value=joined("services", limit=4), flags=["services"]),
        Column(header="Payment", value=joined("payment"), flags=["payment"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["emergency", "eicr", "ev_qualified"],
    faqs=FAQS,
    how_tos=HOW_TOS,
    offer_name="Call-out (indicative)",
    speakable=["#featured-title", "#guides-title"],
)
