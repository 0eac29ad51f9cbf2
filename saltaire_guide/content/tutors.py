from saltaire_guide.mappers.compare_table import contact, joined, yes_dash
from saltaire_guide.schemas.content import Faq, HowTo
from saltaire_guide.schemas.directory import BadgeSpec, Column, DirectoryCategory
from saltaire_guide.schemas.listings import TutorListing

LISTINGS = [
    TutorListing(
        slug="saltaire-tutors",
        name="Saltaire Tutors (DBS • Study Skills • 11+ to A-level)",
        phone_local="01274 000510",
        phone_tel="tel:+441274000510",
        email="hello@saltaire-tutors.example",
        website="#",
        booking_url="#",
        excerpt=(
            "Friendly, DBS-checked local tutors. Maths/English/Science plus 11+, GCSE and A-level. "
            "Study skills coaching and exam-board alignment."
        ),
        price_from="Enquire for tailored quote",
        area_served=["Saltaire", "Shipley", "Baildon"],
        featured=True,
        image="/images/history-unesco.png",
        subjects=["Maths", "English", "Physics", "Chemistry", "Biology", "11+ / Entrance prep"],
        stages=["Primary (KS1/KS2)", "KS3 (Y7–Y9)", "GCSE (Y10–Y11)", "A-level (Y12–Y13)"],
        exam_boards=["AQA", "Edexcel", "OCR", "WJEC"],
        online=True,
        in_person=True,
        group=True,
        one_to_one=True,
        sen_aware=True,
        enhanced_dbs=True,
        safeguarding_policy=True,
        references_available=True,
        languages=["English"],
        payment=["Card", "Bank transfer", "Contactless"],
        notes=["Learning plan agreed at start", "Progress feedback for parents/carers", "Receipts for records"],
        tags=["DBS", "11+ to A-level", "Study skills"],
    ),
    TutorListing(
        slug="shipley-maths-specialist",
        name="Shipley Maths Specialist (GCSE/A-level)",
        phone_local="01274 000520",
        phone_tel="tel:+441274000520",
        website="#",
        excerpt=(
            "Focused maths tuition from KS3 to A-level. Calm explanations, exam technique practice, "
            "homework strategies."
        ),
        price_from="By quote",
        area_served=["Shipley", "Saltaire"],
        featured=True,
        image="/images/salts-mill.png",
        subjects=["Maths", "Further Maths (intro)"],
        stages=["KS3 (Y7–Y9)", "GCSE (Y10–Y11)", "A-level (Y12–Y13)"],
        exam_boards=["AQA", "Edexcel", "OCR"],
        online=True,
        in_person=True,
        one_to_one=True,
        sen_aware=True,
        enhanced_dbs=True,
        safeguarding_policy=True,
        references_available=True,
        languages=["English"],
        payment=["Bank transfer", "Card"],
        notes=["Diagnostic first session optional", "Exam board past paper cycles"],
        tags=["Maths focus"],
    ),
    TutorListing(
        slug="canal-english",
        name="Canal English & ESOL",
        website="#",
        excerpt="English language support, GCSE English Language & Literature, ESOL for adults.",
        price_from="By quote",
        area_served=["Saltaire", "Shipley", "Frizinghall"],
        subjects=["English", "ESOL / EAL"],
        stages=["KS3 (Y7–Y9)", "GCSE (Y10–Y11)", "Adult"],
        exam_boards=["AQA", "Edexcel"],
        online=True,
        in_person=True,
        group=True,
        one_to_one=True,
        enhanced_dbs=True,
        safeguarding_policy=True,
        languages=["English"],
        payment=["Card", "Bank transfer"],
        tags=["English", "ESOL"],
    ),
    TutorListing(
        slug="park-science",
        name="Park Science (Physics • Chemistry • Biology)",
        website="#",
        excerpt="Science specialists for GCSE combined and separate sciences; physics at A-level.",
        price_from="By quote",
        area_served=["Saltaire", "Shipley"],
        subjects=["Physics", "Chemistry", "Biology", "Combined Science"],
        stages=["KS3 (Y7–Y9)", "GCSE (Y10–Y11)", "A-level (Y12–Y13)"],
        exam_boards=["AQA", "Edexcel", "OCR"],
        online=True,
        one_to_one=True,
        sen_aware=True,
        enhanced_dbs=True,
        safeguarding_policy=True,
        references_available=True,
        languages=["English"],
        payment=["Card", "Bank transfer"],
        tags=["Science", "Physics"],
    ),
]

FAQS = [
    Faq(
        q="Do Saltaire tutors have DBS checks?",
        a=(
            "Many do; look for DBS/DBS Update Service and ask for confirmation. We surface DBS and "
            "safeguarding notes where provided."
        ),
    ),
    Faq(
        q="Online or in-person — which is better?",
        a=(
            "Both work. Online helps consistency and sharing resources; in-person can help for "
            "instruments or practical coaching. Choose what the learner engages with best."
        ),
    ),
    Faq(
        q="Which exam boards do tutors cover?",
        a="Common boards include AQA, Edexcel, OCR and WJEC. Confirm your board and year to align resources.",
    ),
    Faq(
        q="Do you publish prices?",
        a=(
            "No; fees change. Ask for a written quote that includes session length, prep/marking, "
            "and cancellation policy."
        ),
    ),
]

HOW_TOS = [
    HowTo(
        name="How to hire a tutor safely",
        total_time="PT10M",
        steps=[
            "Define goals and timeframe; decide online or in-person.",
            "Request DBS status, references and a safeguarding statement.",
            "Confirm exam board and resources (specification, past papers, mark schemes).",
            "Agree schedule, fees, cancellation window and feedback routine in writing.",
            "Begin with a calm diagnostic and review progress monthly.",
        ],
    ),
]

TUTORS = DirectoryCategory(
    slug="tutors",
    label="Tutors",
    title="Tutors in Saltaire",
    description=(
        "Local tutors for primary, GCSE and A-level, 11+ and adult learners. DBS, safeguarding and "
        "exam-board coverage shown where providers have confirmed them."
    ),
    blurb="Maths, English, science and languages.",
    group="Kids & Learning",
    listings=LISTINGS,
    badges=[
        BadgeSpec(flag="enhanced_dbs", label="DBS"),
        BadgeSpec(flag="safeguarding_policy", label="Safeguarding policy"),
        BadgeSpec(flag="references_available", label="References"),
        BadgeSpec(flag="sen_aware", label="SEN-aware"),
        BadgeSpec(flag="online", label="Online"),
        BadgeSpec(flag="in_person", label="In-person"),
        BadgeSpec(flag="group", label="Small group"),
        BadgeSpec(flag="one_to_one", label="1-to-1"),
    ],
    columns=[
        Column(header="DBS", value=yes_dash("enhanced_dbs"), flags=["enhanced_dbs"]),
        Column(header="Safeguarding", value=yes_dash("safeguarding_policy"), flags=["safeguarding_policy"]),
        Column(header="References", value=yes_dash("references_available"), flags=["references_available"]),
        Column(header="SEN-aware", value=yes_dash("sen_aware"), flags=["sen_aware"]),
        Column(header="Online", value=yes_dash("online"), flags=["online"]),
        Column(header="In-person", value=yes_dash("in_person"), flags=["in_person"]),
        Column(header="Group", value=yes_dash("group"), flags=["group"]),
        Column(header="1-to-1", value=yes_dash("one_to_one"), flags=["one_to_one"]),
        Column(header="Subjects", value=joined("subjects", limit=4), flags=["subjects"]),
        Column(header="Contact", value=contact()),
    ],
    ld_properties=["online", "in_person", "sen_aware", "enhanced_dbs"],
    ld_list_properties=[("subjects", "subject"), ("stages", "stage"), ("exam_boards", "examBoard")],
    faqs=FAQS,
    how_tos=HOW_TOS,
)
