from saltaire_guide.mappers.compare_table import contact, joined, yes_dash
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import GardenerListing

LISTINGS = [
    GardenerListing(
        slug="saltaire-garden-care",
        name="Saltaire Garden Care (insured • licensed waste carrier)",
        phone_local="01274 000610",
        phone_tel="tel:+441274000610",
        email="hello@saltaire-gardens.example",
        website="#",
        booking_url="#",
        excerpt=(
            "Regular lawn cuts, hedge trims, seasonal tidy-ups and border refresh. "
            "Licensed green waste removal available."
        ),
        price_from="Quote on visit",
        area_served=["Saltaire", "Shipley", "Baildon"],
        featured=True,
        image="/images/roberts-park.png",
        services=["Lawn mowing", "Hedge trimming", "Garden clearance", "Planting", "Jet washing (paths)"],
        waste_carrier=True,
        insured=True,
        eco=True,
        accepts_green_bin=True,
        payment=["Card", "Bank transfer"],
        in_person=True,
        notes=["Before/after photos on request", "Regular maintenance routes for BD18", "Receipts provided"],
        tags=["Featured", "Waste carrier", "Insured"],
    ),
    GardenerListing(
        slug="shipley-green-hands",
        name="Shipley Green Hands (regular routes)",
        phone_local="01274 000620",
        phone_tel="tel:+441274000620",
        website="#",
        excerpt=(
            "Route-based lawn & hedge service with clear scheduling. Optional border weeding and "
            "edging. Green waste by arrangement."
        ),
        price_from="By quote",
        area_served=["Shipley", "Saltaire"],
        featured=True,
        image="/images/saltaire-canal.png",
        services=["Lawn mowing", "Hedge trimming", "Edging", "Weeding", "Leaf clears (autumn)"],
        waste_carrier=True,
        insured=True,
        accepts_green_bin=True,
        removal_included=True,
        payment=["Bank transfer"],
        in_person=True,
        notes=["Regular slots only (not one-off clearances in peak months)"],
        tags=["Featured", "Routes"],
    ),
    GardenerListing(
        slug="baildon-hedge-lawn",
        name="Baildon Hedge & Lawn",
        website="#",
        excerpt="Hedge shaping, small-tree pruning (light), lawn cuts and strimming. Waste removal by arrangement.",
        price_from="By quote",
        area_served=["Baildon", "Saltaire fringe"],
        services=["Hedge trimming", "Small pruning (light)", "Lawn mowing", "Strimming"],
        waste_carrier=True,
        insured=True,
        accepts_green_bin=True,
        payment=["Card", "Cash"],
        in_person=True,
        tags=["Hedges", "Light pruning"],
    ),
    GardenerListing(
        slug="canal-borders-planting",
        name="Canal Borders & Planting",
        website="#",
        excerpt=(
            "Border refresh, soil prep, mulch, seasonal colour and container planting. "
            "Advice on low-maintenance choices."
        ),
        price_from="By quote",
        area_served=["Saltaire", "Shipley"],
        services=["Planting", "Mulching", "Weeding", "Border design (small)"],
        insured=True,
        accepts_green_bin=True,
        payment=["Bank transfer"],
        in_person=True,
        tags=["Planting", "Borders"],
    ),
    GardenerListing(
        slug="aire-patio-fence-repair",
        name="Aire Patio & Fence Repairs (small jobs)",
        website="#",
        excerpt=(
            "Small fence panel swaps and minor patio relays/pointing. Pressure washing for "
            "paths/patios. No major landscaping."
        ),
        price_from="By quote",
        area_served=["BD18"],
        services=["Fence repair (small)", "Patio repoint (small)", "Pressure washing"],
        waste_carrier=True,
        insured=True,
        removal_included=True,
        payment=["Card"],
        in_person=True,
        tags=["Repairs", "Jet wash"],
    ),
]

FAQS = [
    Faq(
        q="Do gardeners take green waste away?",
        a=(
            "Some do — either via your green bin or as licensed carriers. Confirm what’s included "
            "and keep a receipt for removals."
        ),
    ),
    Faq(
        q="When is the best time to trim hedges?",
        a=(
            "Light trims are common outside peak nesting activity. Check current advice and avoid "
            "disturbing wildlife."
        ),
    ),
    Faq(
        q="Do you publish prices?",
        a=(
            "No. Costs vary with lawn size, hedge height/length, access and waste. Get a short "
            "written quote first."
        ),
    ),
    Faq(
        q="Can they fix fences or patios?",
        a=(
            "Many handle small repairs and jet washing. Bigger structural or drainage-related work "
            "needs a specialist."
        ),
    ),
    Faq(
        q="Are gardeners insured?",
        a="Reputable providers carry public liability insurance — ask for confirmation on request.",
    ),
]

HOW_TOS = [
    HowTo(
        name="How to hire a gardener safely",
        total_time="PT5M",
        steps=[
            "Share photos and a short scope of work.",
            "Confirm insurance and waste-handling plan (green bin vs licensed removal).",
            "Agree wildlife-aware practice and quiet hours where possible.",
            "Get a simple written quote and schedule, plus wet-weather fallback.",
        ],
    ),
    HowTo(
        name="How to handle green waste from gardening",
        steps=[
            "Decide between your green bin or licensed removal based on volume.",
            "If removed by a carrier, keep the invoice/receipt with carrier details.",
        ],
    ),
]

GARDENERS = DirectoryCategory(
    slug="gardeners",
    label="Gardeners",
    title="Gardeners in Saltaire",
    description=(
        "Local gardeners for lawns, hedges, seasonal tidy-ups, planting and small repairs. "
        "Insurance and green-waste handling shown where providers have confirmed them."
    ),
    blurb="Lawns, hedges, tidy-ups.",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="insured", label="Insured"),
        BadgeSpec(flag="waste_carrier", label="Waste carrier"),
        BadgeSpec(flag="accepts_green_bin", label="Uses green bin"),
        BadgeSpec(flag="removal_included", label="Removal included"),
        BadgeSpec(flag="eco", label="Eco options"),
        BadgeSpec(flag="dbs", label="DBS (domestic)"),
    ],
    columns=[
        Column(header="Insured", value=yes_dash("insured"), flags=["insured"]),
        Column(header="Waste carrier", value=yes_dash("waste_carrier"), flags=["waste_carrier"]),
        Column(header="Green bin", value=yes_dash("accepts_green_bin"), flags=["accepts_green_bin"]),
        Column(header="Removal included", value=yes_dash("removal_included"), flags=["removal_included"]),
        Column(header="Eco options", value=yes_dash("eco"), flags=["eco"]),
        Column(header="Typical services", value=joined("services", limit=4), flags=["services"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["insured", "waste_carrier", "eco", "removal_included"],
    ld_list_properties=[("services", "service")],
    faqs=FAQS,
    how_tos=HOW_TOS,
)
