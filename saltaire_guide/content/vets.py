from saltaire_guide.mappers.compare_table import joined, mapped, text
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import VetListing

OUT_OF_HOURS = {"own": "Own", "partner": "Partner", "check": "Check"}

COMMON_SPECIES = ["dog", "cat", "rabbit", "small-mammal"]

# Nearby clinics for orientation only, nobody is featured or verified yet
LISTINGS = [
    VetListing(
        slug="vets4pets-bingley",
        name="Vets4Pets (Bingley)",
        website="https://www.vets4pets.com",
        satnav="Bingley (BD16) — verify exact address",
        area_served=["Bingley", "Saltaire nearby"],
        excerpt=(
            "National brand practice. Routine care, vaccinations, surgery; check branch page for "
            "hours and OOH policy."
        ),
        out_of_hours="partner",
        species=COMMON_SPECIES,
        services=["Consultations", "Vaccinations", "Neutering", "Diagnostics", "Surgery (varies)"],
        image="/images/whats-on.png",
        notes=[
            "Verify branch page for live info. Policies vary by branch.",
            "Retail-park style locations sometimes have free parking — read on-site signs.",
            "Most branches wheelchair accessible; confirm ramp/door width in advance.",
        ],
        tags=["Chain", "Verify OOH"],
    ),
    VetListing(
        slug="bingley-veterinary-centre",
        name="Bingley Veterinary Centre",
        website="#",
        satnav="Bingley (BD16) — verify exact address",
        area_served=["Bingley", "Saltaire corridor"],
        excerpt=(
            "Independent presence historically noted in Bingley area. Check official site for "
            "current team, hours and services."
        ),
        out_of_hours="check",
        species=COMMON_SPECIES,
        services=["Consultations", "Vaccinations", "Dentistry (varies)", "Surgery (varies)"],
        image="/images/saltaire-canal.png",
        notes=[
            "Please verify current ownership and out-of-hours arrangements.",
            "Street or local car parks — follow signage.",
            "Ask about step-free access and any narrow thresholds.",
        ],
        tags=["Independent", "Verify details"],
    ),
    VetListing(
        slug="vets-now-leeds",
        name="Vets Now (Leeds) — Out-of-hours network (regional)",
        website="https://www.vets-now.com",
        satnav="Leeds — verify nearest site before travelling",
        area_served=["Leeds", "West Yorkshire"],
        excerpt=(
            "Regional out-of-hours provider used by many day practices. ALWAYS call first — "
            "they’ll direct you to the right site."
        ),
        emergency=True,
        out_of_hours="own",
        species=COMMON_SPECIES,
        services=["Emergency triage", "Urgent care", "Stabilisation", "Referral onward if needed"],
        image="/images/salts-mill.png",
        notes=[
            "Confirm your registered vet’s OOH partner before travelling.",
            "Emergency sites vary; follow staff instructions on arrival.",
            "OOH sites prioritise access; call ahead about ramps/doors.",
        ],
        tags=["Emergency", "Call first"],
    ),
    VetListing(
        slug="rcvs-find-a-vet",
        name="RCVS “Find a Vet” (official directory)",
        website="https://findavet.rcvs.org.uk/",
        satnav="Online — UK-wide directory by the Royal College of Veterinary Surgeons",
        area_served=["All UK"],
        excerpt=(
            "Official RCVS directory — search by postcode to find registered veterinary practices "
            "and confirm their details."
        ),
        out_of_hours="check",
        species=[*COMMON_SPECIES, "bird", "reptile", "other"],
        services=["Directory search", "Practice details", "Professional registers"],
        image="/images/roberts-park.png",
        notes=["Most authoritative starting point for checking clinics and OOH arrangements."],
        tags=["Authoritative", "Directory"],
    ),
    VetListing(
        slug="vets4pets-bradford-idle",
        name="Vets4Pets (Bradford/Idle) — verify branch",
        website="https://www.vets4pets.com",
        satnav="Idle/Bradford — verify exact store/retail location",
        area_served=["Idle", "Bradford", "Shipley fringe"],
        excerpt=(
            "Brand branch often serving the Bradford/Idle corridor. Check the exact branch page for "
            "directions, parking and OOH."
        ),
        out_of_hours="partner",
        species=COMMON_SPECIES,
        services=["Consultations", "Vaccinations", "Routine surgery (varies)"],
        image="/images/whats-on.png",
        notes=[
            "Branch pages change — recheck before setting off.",
            "Usually retail-park style; obey time limits on signage.",
            "Typically step-free; confirm on the branch page.",
        ],
        tags=["Chain", "Verify OOH"],
    ),
    VetListing(
        slug="aireworth-vets-keighley",
        name="Aireworth Vets (Keighley) — verify current details",
        website="#",
        satnav="Keighley (BD20) — verify exact address",
        area_served=["Keighley", "Airedale corridor"],
        excerpt=(
            "Keighley/Airedale practice often referenced by pet owners. Check official site for "
            "phone, hours and OOH links."
        ),
        out_of_hours="check",
        species=COMMON_SPECIES,
        services=["Consultations", "Vaccinations", "Surgery (varies)"],
        image="/images/saltaire-canal.png",
        notes=[
            "Confirm travel time and parking before you go.",
            "Follow on-site signs or nearby public car parks.",
            "Call to confirm ramps and door widths.",
        ],
        tags=["Independent?", "Verify details"],
    ),
]

FAQS = [
    Faq(
        q="Who should I call first in an emergency?",
        a=(
            "Call your registered practice. If they are closed, their voicemail or website will name "
            "their out-of-hours partner. Follow their direction before travelling."
        ),
    ),
    Faq(
        q="Can I just turn up without calling?",
        a=(
            "Phoning first helps the team prepare and may direct you to the correct site more quickly. "
            "In genuine life-threatening emergencies, follow professional advice immediately."
        ),
    ),
    Faq(
        q="How do I register with a vet in Saltaire?",
        a=(
            "Most clinics have an online form. Have your details and your pet’s details ready "
            "(species, age, microchip, previous vet). Ask about out-of-hours arrangements."
        ),
    ),
    Faq(
        q="What vaccinations are typical for dogs and cats?",
        a=(
            "Schedules vary. Dogs: core (DHP), leptospirosis depending on risk. Cats: core (flu + "
            "panleukopenia), FeLV for at-risk cats. Your vet will advise based on lifestyle."
        ),
    ),
    Faq(
        q="Do clinics do direct insurance claims?",
        a=(
            "Some do, some don’t. Ask reception about their process. Be prepared to pay at the time "
            "of treatment unless a direct claim is agreed."
        ),
    ),
    Faq(
        q="Where can I verify a clinic is registered?",
        a="Use the RCVS “Find a Vet” directory to search by postcode and check practice details.",
    ),
    Faq(
        q="Do you list prices?",
        a=(
            "No. Prices and offers change often. Speak to clinics directly for current fees and "
            "package details."
        ),
    ),
    Faq(
        q="Are the clinics listed endorsed?",
        a=(
            "No. Names are included to help orientation. We do not guarantee any provider. Verify "
            "details and make your own choice."
        ),
    ),
    Faq(
        q="What about exotic pets?",
        a="Call ahead to confirm species experience. Some cases may be referred to specialist services.",
    ),
    Faq(
        q="How should I prepare for travel with my pet?",
        a=(
            "Contact your vet well in advance for an Animal Health Certificate (EU) or other country "
            "requirements. Ensure microchip and vaccinations are valid."
        ),
    ),
    Faq(
        q="What if I can’t get through to my registered vet?",
        a=(
            "Try again shortly, check their website, and listen to the voicemail for the out-of-hours "
            "partner. If directed to an emergency provider, go as instructed."
        ),
    ),
    Faq(
        q="Is home euthanasia available?",
        a="Availability varies. Discuss with your clinic — some offer home visits or partner with services.",
    ),
]

HOW_TOS = [
    HowTo(
        name="What to do in a pet emergency (local owner steps)",
        total_time="PT5M",
        steps=[
            "Call your registered practice immediately.",
            "If closed, follow the voicemail/website to the out-of-hours partner.",
            "Secure your pet for transport; bring meds and insurance details if possible.",
            "Follow the vet’s instruction without delay.",
        ],
    ),
    HowTo(
        name="How to register with a vet (Saltaire & Shipley)",
        total_time="PT10M",
        steps=[
            "Choose a local clinic and complete their online registration form.",
            "Provide owner and pet details (species, age, microchip, prior vet).",
            "Save the clinic and out-of-hours numbers in your phone.",
        ],
    ),
    HowTo(
        name="How to arrange an Animal Health Certificate (EU travel)",
        total_time="PT30M",
        steps=[
            "Check rabies vaccination status and microchip.",
            "Book an AHC appointment in advance of travel.",
            "Bring documents as advised by your clinic.",
        ],
    ),
    HowTo(
        name="How to prepare for an insurance claim at the vet",
        total_time="PT10M",
        steps=[
            "Bring insurer name, policy number and contact email.",
            "Ask about direct claim vs pay-and-claim.",
            "Keep itemised invoices and medical notes for your records.",
        ],
    ),
]

VETS = DirectoryCategory(
    slug="vets",
    label="Vets",
    title="Vets in Saltaire & Shipley",
    description=(
        "Practical local guide to veterinary care around Saltaire & Shipley: how to register, what "
        "to do in emergencies, vaccination & travel notes, insurance tips, and nearby clinics to "
        "consider (verify details via the RCVS directory)."
    ),
    blurb="Consultations, vaccines, advice.",
    group="Pets",
    entity_type="VeterinaryCare",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="verified", label="Verified"),
        BadgeSpec(flag="emergency", label="Out-of-hours service"),
    ],
    columns=[
        Column(header="Area", value=joined("area_served"), flags=["area_served"]),
        Column(header="Species", value=joined("species"), flags=["species"]),
        Column(header="Out-of-hours", value=mapped("out_of_hours", OUT_OF_HOURS), flags=["out_of_hours"]),
        Column(header="Services (summary)", value=joined("services"), flags=["services"]),
        Column(header="Location", value=text("satnav"), flags=["satnav"]),
    ],
    ld_list_properties=[("species", "species"), ("services", "service")],
    faqs=FAQS,
    how_tos=HOW_TOS,
    speakable=["#listings-title", "#faq-title"],
)
