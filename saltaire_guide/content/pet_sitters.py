from saltaire_guide.mappers.compare_table import contact, joined, yes_dash
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import PetSitterListing

WHATSAPP_LINK = "https://wa.me/447305367941"

LISTINGS = [
    PetSitterListing(
        slug="saltairedogs",
        name="SaltaireDogs — Pet Sitting & Drop-ins (WhatsApp preferred)",
        phone_local="07305367941",
        phone_tel="tel:+447305367941",
        whatsapp_link=WHATSAPP_LINK,
        email="saltairedogs@proton.me",
        website="https://saltairedogs.uk",
        excerpt=(
            "Trusted local pet sitting for dogs & cats. Daily drop-ins, holiday cover, medication by "
            "instruction, photos after each visit. WhatsApp preferred for enquiries."
        ),
        price_from="Quote on enquiry",
        area_served=["Saltaire", "Shipley", "Roberts Park"],
        featured=True,
        verified=True,
        image="/images/saltairedogs-hero.jpg",
        services=[
            "Dog sitting (home drop-ins)",
            "Cat sitting (litter/feeding/companionship)",
            "Overnight sitting (limited availability)",
            "Small animal care (rabbits/guinea pigs/indoor pets)",
            "Medication by instruction",
            "Photo updates after each visit",
        ],
        insured=True,
        dbs=True,
        overnight=True,
        cats=True,
        dogs=True,
        small_pets=True,
        medication=True,
        key_hold=True,
        photo_updates=True,
        gps_updates=True,
        house_sitting=True,
        payment=["Bank transfer", "Card", "Cash"],
        in_person=True,
        notes=[
            "WhatsApp messages preferred for faster replies.",
            "DBS certificate and public liability insurance available on request.",
            "Meet & greet recommended before first booking.",
        ],
        tags=["#1 recommended", "DBS checked", "Insured", "Photo updates", "WhatsApp preferred"],
    ),
    PetSitterListing(
        slug="shipley-pet-sit",
        name="Shipley Pet Sit",
        website="#",
        excerpt="Daily cat sits and weekend dog visits. Limited overnight cover; medication on prior instruction.",
        price_from="By quote",
        area_served=["Shipley", "Saltaire fringe"],
        services=["Cat sitting", "Dog drop-ins (short)", "Plant watering"],
        insured=True,
        cats=True,
        dogs=True,
        medication=True,
        key_hold=True,
        photo_updates=True,
        payment=["Bank transfer"],
        tags=["Cat care"],
    ),
    PetSitterListing(
        slug="canal-side-pet-care",
        name="Canal-Side Pet Care",
        website="#",
        excerpt="Dog & small pet drop-ins near the canal. Simple text updates; no overnight house-sitting.",
        price_from="By quote",
        area_served=["Saltaire canal belt"],
        services=["Dog drop-ins", "Small animal checks"],
        insured=True,
        dogs=True,
        small_pets=True,
        key_hold=True,
        payment=["Cash", "Bank transfer"],
        tags=["Budget", "Small pets"],
    ),
    PetSitterListing(
        slug="victoria-road-house-sits",
        name="Victoria Road House-Sits",
        website="#",
        excerpt=(
            "Overnight house-sitting with pet care (limited slots). Prefers adult dogs and "
            "indoor-only cats. Written scope required."
        ),
        price_from="By quote",
        area_served=["Saltaire core", "Shipley"],
        services=["Overnight house-sitting", "Dog & cat care", "Mail/plant care"],
        insured=True,
        cats=True,
        dogs=True,
        medication=True,
        key_hold=True,
        photo_updates=True,
        house_sitting=True,
        overnight=True,
        payment=["Bank transfer"],
        tags=["Overnights"],
    ),
]

FAQS = [
    Faq(
        q="Do pet sitters offer overnight house-sitting?",
        a=(
            "Some do — slots are limited. Overnights include evening/morning presence and pet "
            "routines. Confirm privacy and camera policies."
        ),
    ),
    Faq(
        q="Can sitters give medication?",
        a=(
            "Many can give meds strictly to owner instructions. Provide labelled meds and written "
            "directions, plus vet details."
        ),
    ),
    Faq(
        q="Do you publish prices?",
        a=(
            "No fixed tariffs here — costs vary by visits/day, travel, timing, meds and house-sitting. "
            "Ask for a simple written quote."
        ),
    ),
]

HOW_TOS = [
    HowTo(
        name="How to book a pet sitter in Saltaire",
        steps=[
            "Message dates, pets and address area via WhatsApp or email.",
            "Share routines, medication instructions and vet details.",
            "Agree visits per day, timing windows, and photo updates.",
            "Confirm price, what’s included and payment method.",
        ],
    ),
]

PET_SITTERS = DirectoryCategory(
    slug="pet-sitters",
    label="Pet sitters",
    title="Pet Sitters in Saltaire",
    description=(
        "Trusted local pet sitting for dogs, cats and small animals: drop-in visits, overnight "
        "house-sitting, medication by instruction and photo updates."
    ),
    blurb="Home visits, overnight sits.",
    group="Pets",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="verified", label="Verified"),
        BadgeSpec(flag="insured", label="Insured"),
        BadgeSpec(flag="dbs", label="DBS"),
        BadgeSpec(flag="photo_updates", label="Photo updates"),
        BadgeSpec(flag="gps_updates", label="GPS (walks)"),
        BadgeSpec(flag="medication", label="Medication by instruction"),
        BadgeSpec(flag="overnight", label="Overnights"),
        BadgeSpec(flag="house_sitting", label="House-sitting"),
        BadgeSpec(flag="cats", label="Cats"),
        BadgeSpec(flag="dogs", label="Dogs"),
        BadgeSpec(flag="small_pets", label="Small pets"),
    ],
    columns=[
        Column(header="DBS", value=yes_dash("dbs"), flags=["dbs"]),
        Column(header="Insured", value=yes_dash("insured"), flags=["insured"]),
        Column(header="Cats", value=yes_dash("cats"), flags=["cats"]),
        Column(header="Dogs", value=yes_dash("dogs"), flags=["dogs"]),
        Column(header="Small pets", value=yes_dash("small_pets"), flags=["small_pets"]),
        Column(header="Overnights", value=yes_dash("overnight"), flags=["overnight"]),
        Column(header="Medication", value=yes_dash("medication"), flags=["medication"]),
        Column(header="Photo updates", value=yes_dash("photo_updates"), flags=["photo_updates"]),
        Column(header="Payment", value=joined("payment"), flags=["payment"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["dbs", "insured"],
    ld_list_properties=[("services", "service")],
    faqs=FAQS,
    how_tos=HOW_TOS,
)
