"""Locksmiths: lockouts, uPVC multipoint faults, anti-snap upgrades, boarding-up.

No bypass instructions anywhere in this copy; entry always needs proof of right-to-enter.
"""

from saltaire_guide.mappers.compare_table import contact, joined, tiered, yes_dash
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import LocksmithListing

LISTINGS = [
    LocksmithListing(
        slug="saltaire-locksmiths",
        name="Saltaire Locksmiths (24/7, Non-destructive First)",
        phone_local="01274 000410",
        phone_tel="tel:+441274000410",
        website="#",
        booking_url="#",
        excerpt=(
            "Emergency lockouts, uPVC multipoint faults, anti-snap cylinder upgrades (BS3621/TS007), "
            "burglary repairs and boarding-up."
        ),
        price_from="Call for estimate",
        emergency=True,
        available_24h=True,
        nondestructive_first=True,
        upvc_multipoint=True,
        cylinder_upgrade=True,
        boarding_up=True,
        burglary_repair=True,
        commercial=True,
        area_served=["Saltaire", "Shipley", "Baildon"],
        featured=True,
        image="/images/salts-mill.png",
        tags=["24/7", "Non-destructive first", "uPVC", "BS3621/TS007"],
        services=[
            "Emergency entry (ID & proof required)",
            "uPVC gearboxes",
            "Cylinder upgrades",
            "Burglary repairs",
            "Boarding-up",
        ],
        payment=["Card", "Bank transfer", "Contactless"],
        notes=["Proof of right-to-enter required for lockouts (ID + address)."],
    ),
    LocksmithListing(
        slug="shipley-rapid-locksmith",
        name="Shipley Rapid Locksmith (Emergency)",
        phone_local="01274 000420",
        phone_tel="tel:+441274000420",
        website="#",
        booking_url="#",
        excerpt=(
            "Fast response for lockouts and failed uPVC doors. Transparent call-out at booking; "
            "receipts provided."
        ),
        price_from="Transparent call-out on booking",
        emergency=True,
        available_24h=True,
        nondestructive_first=True,
        upvc_multipoint=True,
        cylinder_upgrade=True,
        burglary_repair=True,
        area_served=["Shipley", "Saltaire", "Frizinghall"],
        featured=True,
        image="/images/plan-your-visit.png",
        tags=["24/7", "uPVC"],
        services=["Emergency entry", "uPVC mechanisms", "Cylinder replacements"],
        payment=["Card", "Cash"],
        notes=["Phone is fastest; web booking after-hours is limited."],
    ),
    LocksmithListing(
        slug="aire-valley-security",
        name="Aire Valley Security & Locksmith",
        website="#",
        booking_url="#",
        excerpt="Security checks, cylinder upgrades to BS3621/TS007, and tidy refits for heritage doors.",
        price_from="By quote",
        nondestructive_first=True,
        upvc_multipoint=True,
        cylinder_upgrade=True,
        burglary_repair=True,
        commercial=True,
        area_served=["Saltaire", "Shipley", "Bingley"],
        image="/images/history-unesco.png",
        tags=["Upgrades", "Commercial"],
        services=["Security survey", "Cylinder/handle upgrades", "Commercial door hardware"],
        payment=["Card", "Bank transfer"],
    ),
    LocksmithListing(
        slug="bd18-boardup-repair",
        name="BD18 Boarding-Up & Repair",
        website="#",
        booking_url="#",
        excerpt="Post-incident temporary secure, replacement glazing coordination, and lock refit scheduling.",
        price_from="By quote",
        emergency=True,
        boarding_up=True,
        burglary_repair=True,
        commercial=True,
        area_served=["Saltaire", "Shipley"],
        image="/images/plan-your-visit.png",
        tags=["Boarding-up", "Burglary repair"],
        services=["Boarding-up", "Temporary secure", "Lock refit coordination"],
        payment=["Card", "Bank transfer"],
    ),
    LocksmithListing(
        slug="lock-lab-keycut",
        name="Lock Lab (Key-cut & Bench Service)",
        website="#",
        booking_url="#",
        excerpt="Key cutting in-store, bench-serviced cylinders, and hardware advice for terraces.",
        price_from="By quote",
        nondestructive_first=True,
        cylinder_upgrade=True,
        key_cutting=True,
        area_served=["Shipley", "Saltaire"],
        image="/images/salts-mill.png",
        tags=["Key-cut", "Bench service"],
        services=["Key cutting", "Cylinder servicing", "Hardware advice"],
        payment=["Card", "Bank transfer"],
    ),
]

FAQS = [
    Faq(
        q="Do Saltaire locksmiths offer 24/7 cover?",
        a=(
            "Some do — see the 24/7 badge. Availability varies by day/time; featured providers are "
            "quickest to call."
        ),
    ),
    Faq(
        q="What proof do I need for a lockout?",
        a=(
            "Bring photo ID and something linking you to the address (tenancy letter, utility in your "
            "name, agent confirmation). Policies vary; ask when booking."
        ),
    ),
    Faq(
        q="What are BS3621 and TS007?",
        a=(
            "They are UK standards relating to lock performance and cylinders. Ask your locksmith which "
            "ratings fit your door and insurer requirements."
        ),
    ),
    Faq(
        q="Should I replace locks after losing my keys?",
        a=(
            "Often yes — especially if your address could be linked to the keys. A cylinder change with "
            "new keys removes the risk."
        ),
    ),
    Faq(
        q="How fast can someone attend?",
        a="Emergency ETAs depend on distance and workload. Clear location info and access notes help.",
    ),
]

HOW_TOS = [
    HowTo(
        name="How to handle a home lockout safely (no bypass instructions)",
        total_time="PT3M",
        steps=[
            "Check if a trusted person has a spare key.",
            "If there is immediate risk (child/vulnerable person), call 999 (UK emergency).",
            "Contact a locksmith with a non-destructive-first policy and ask for an ETA/estimate.",
            "Prepare ID and proof of address/tenancy for lawful entry verification.",
            "Keep receipts and any photos for insurance or landlord records.",
        ],
    ),
]

LOCKSMITHS = DirectoryCategory(
    slug="locksmiths",
    label="Locksmiths",
    title="Locksmiths in Saltaire",
    description=(
        "Local locksmiths for emergency lockouts, uPVC multipoint faults, anti-snap cylinder "
        "upgrades (BS3621/TS007), burglary repairs and boarding-up."
    ),
    blurb="Emergency entry, lock repair.",
    entity_type="Locksmith",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="emergency", label="Emergency"),
        BadgeSpec(flag="available_24h", label="24/7"),
        BadgeSpec(flag="nondestructive_first", label="Non-destructive first"),
        BadgeSpec(flag="upvc_multipoint", label="uPVC multipoint"),
        BadgeSpec(flag="cylinder_upgrade", label="BS3621/TS007"),
        BadgeSpec(flag="boarding_up", label="Boarding-up"),
        BadgeSpec(flag="burglary_repair", label="Burglary repair"),
        BadgeSpec(flag="key_cutting", label="Key-cut"),
        BadgeSpec(flag="auto", label="Auto"),
        BadgeSpec(flag="commercial", label="Commercial"),
    ],
    columns=[
        Column(
            header="24/7",
            value=tiered("available_24h", "emergency", "Daytime"),
            flags=["available_24h", "emergency"],
        ),
        Column(header="Non-destructive first", value=yes_dash("nondestructive_first"), flags=["nondestructive_first"]),
        Column(header="uPVC multipoint", value=yes_dash("upvc_multipoint"), flags=["upvc_multipoint"]),
        Column(header="BS3621/TS007", value=yes_dash("cylinder_upgrade"), flags=["cylinder_upgrade"]),
        Column(header="Boarding-up", value=yes_dash("boarding_up"), flags=["boarding_up"]),
        Column(header="Burglary repair", value=yes_dash("burglary_repair"), flags=["burglary_repair"]),
        Column(header="Key-cut", value=yes_dash("key_cutting"), flags=["key_cutting"]),
        Column(header="Auto", value=yes_dash("auto"), flags=["auto"]),
        Column(header="Commercial", value=yes_dash("commercial"), flags=["commercial"]),
        Column(header="Payment", value=joined("payment"), flags=["payment"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["nondestructive_first", "upvc_multipoint", "cylinder_upgrade", "boarding_up"],
    faqs=FAQS,
    how_tos=HOW_TOS,
)
