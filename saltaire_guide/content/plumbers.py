from saltaire_guide.mappers.compare_table import contact, joined, yes_dash, yes_no
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import PlumberListing

LISTINGS = [
    PlumberListing(
        slug="saltaire-plumbing",
        name="Saltaire Plumbing & Repairs",
        phone_local="01274 000200",
        phone_tel="tel:+441274000200",
        website="#",
        booking_url="#",
        excerpt="Local repairs, leaks and bathroom fixes. Same-day slots where possible. Card accepted.",
        price_from="Call for estimate",
        emergency=True,
        area_served=["Saltaire", "Shipley", "Baildon"],
        featured=True,
        image="/images/whats-on.png",
        tags=["Emergency", "24/7", "Card"],
        services=["Leaks", "Toilets", "Taps", "Radiators", "Outdoor taps"],
        payment=["Card", "Cash", "Contactless"],
        notes=["Video call diagnostics available on request."],
    ),
    PlumberListing(
        slug="shipley-plumbers",
        name="Shipley Plumbers (Same-Day)",
        phone_local="01274 000310",
        phone_tel="tel:+441274000310",
        website="#",
        booking_url="#",
        excerpt="Rapid response team covering Shipley & Saltaire. Good for urgent leaks and blockages.",
        price_from="Transparent call-out on booking",
        emergency=True,
        gas_safe=True,
        area_served=["Shipley", "Saltaire", "Frizinghall"],
        featured=True,
        image="/images/plan-your-visit.png",
        tags=["Emergency", "Drain jetting", "Card"],
        services=["Burst pipes (first response)", "Blockages", "Leaks", "Shut-off support"],
        payment=["Card", "Cash"],
        notes=["Can arrange Gas Safe engineer for boiler faults."],
    ),
    PlumberListing(
        slug="baildon-bathrooms",
        name="Baildon Bathrooms & Plumbing",
        website="#",
        excerpt="Bathroom refits and routine plumbing. Not a 24/7 emergency service. Pre-book recommended.",
        price_from="By quote",
        area_served=["Baildon", "Saltaire", "Shipley"],
        image="/images/roberts-park.png",
        tags=["Bathrooms", "Installations"],
        services=["Bathrooms", "Showers", "Tiling (partners)"],
        payment=["Bank transfer", "Card"],
    ),
    PlumberListing(
        slug="aire-valley-drainage",
        name="Aire Valley Drainage",
        website="#",
        excerpt="Blockages and jetting across the Aire Valley. Good fallback for stubborn drains.",
        price_from="By quote",
        emergency=True,
        area_served=["Shipley", "Bingley", "Saltaire"],
        image="/images/saltaire-canal.png",
        tags=["Drain jetting", "CCTV"],
        services=["Blockages", "Jetting", "CCTV surveys"],
        payment=["Card", "Cash"],
    ),
    PlumberListing(
        slug="heritage-heating-handovers",
        name="Heritage Heating (Boiler Handover)",
        website="#",
        excerpt="Gas Safe boiler servicing & handover (by appointment). Not an emergency plumber.",
        price_from="By quote",
        gas_safe=True,
        area_served=["Saltaire", "Shipley", "Leeds fringe"],
        image="/images/salts-mill.png",
        tags=["Gas Safe", "Boilers"],
        services=["Boiler service", "Landlord certs"],
        payment=["Card", "Bank transfer"],
    ),
]

FAQS = [
    Faq(
        q="Do plumbers in Saltaire offer 24/7 emergency callout?",
        a=(
            "Some do; availability varies by day and season. Call featured providers first and "
            "provide leak details and access notes."
        ),
    ),
    Faq(
        q="Can a plumber fix my boiler?",
        a=(
            "Boilers and gas appliances must be serviced by a Gas Safe registered engineer. Many "
            "plumbing firms can arrange one; ask when you call."
        ),
    ),
    Faq(
        q="Where is the stop tap in typical Saltaire terraces?",
        a=(
            "Often under the kitchen sink or in a utility/under-stairs cupboard. If it is stiff, "
            "avoid forcing it and wait for a professional."
        ),
    ),
    Faq(
        q="Do plumbers take card?",
        a="Many do, but not all. Ask on booking; carry a backup payment method.",
    ),
    Faq(
        q="Should I try to seal a leak myself?",
        a=(
            "Avoid DIY sealants on pressurised pipes; this can worsen the issue. Isolate water if "
            "safe and call a professional."
        ),
    ),
]

HOW_TOS = [
    HowTo(
        name="How to isolate your water safely before a plumber arrives",
        total_time="PT3M",
        steps=[
            "Locate the internal stop tap (often under the kitchen sink or in a utility cupboard).",
            "Turn the valve clockwise to close. Do not force a seized valve.",
            "Open a cold tap briefly to confirm flow has stopped.",
            "If unsafe or you cannot find the tap, move items away from the leak and wait for a professional.",
        ],
    ),
]

PLUMBERS = DirectoryCategory(
    slug="plumbers",
    label="Plumbers",
    title="Plumbers in Saltaire",
    description=(
        "Local plumbers for leaks, blockages, bathrooms and boiler handovers. Featured providers "
        "with instant call buttons and a safe stop-tap guide."
    ),
    blurb="Emergencies, leaks, bathrooms, boilers.",
    entity_type="Plumber",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="emergency", label="Emergency"),
        BadgeSpec(flag="gas_safe", label="Gas Safe"),
    ],
    columns=[
        Column(header="Emergency", value=yes_no("emergency"), flags=["emergency"]),
        Column(header="Gas Safe (handover)", value=yes_dash("gas_safe"), flags=["gas_safe"]),
        Column(header="Typical services", value=joined("services", limit=4), flags=["services"]),
        Column(header="Payment", value=joined("payment"), flags=["payment"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["emergency", "gas_safe"],
    faqs=FAQS,
    how_tos=HOW_TOS,
    offer_name="Local visit",
)
