from typing import Literal

from pydantic import BaseModel


class Listing(BaseModel):
    slug: str
    name: str
    phone_local: str | None = None
    phone_tel: str | None = None  # tel:+44...
    email: str | None = None
    website: str | None = None
    booking_url: str | None = None
    whatsapp_link: str | None = None
    excerpt: str | None = None
    price_from: str | None = None
    emergency: bool = False
    available_24h: bool = False
    accreditations: list[str] = []
    area_served: list[str] = []
    featured: bool = False
    verified: bool = False
    image: str | None = None
    tags: list[str] = []
    services: list[str] = []
    payment: list[str] = []
    notes: list[str] = []


class ElectricianListing(Listing):
    ev_qualified: bool = False
    eicr: bool = False
    landlord: bool = False
    rewires: bool = False
    lighting: bool = False
    consumer_units: bool = False


class GardenerListing(Listing):
    waste_carrier: bool = False
    insured: bool = False
    dbs: bool = False
    eco: bool = False
    accepts_green_bin: bool = False
    removal_included: bool = False
    in_person: bool = False


class LocksmithListing(Listing):
    nondestructive_first: bool = False
    upvc_multipoint: bool = False
    cylinder_upgrade: bool = False  # BS3621 / TS007
    boarding_up: bool = False
    burglary_repair: bool = False
    key_cutting: bool = False
    auto: bool = False  # vehicle work, ownership proof required
    commercial: bool = False


class PlumberListing(Listing):
    gas_safe: bool = False  # can dispatch a Gas Safe engineer


class TutorListing(Listing):
    subjects: list[str] = []
    stages: list[str] = []
    exam_boards: list[str] = []
    languages: list[str] = []
    online: bool = False
    in_person: bool = False
    group: bool = False
    one_to_one: bool = False
    sen_aware: bool = False
    enhanced_dbs: bool = False
    safeguarding_policy: bool = False
    references_available: bool = False


class PetSitterListing(Listing):
    insured: bool = False
    dbs: bool = False
    overnight: bool = False
    cats: bool = False
    dogs: bool = False
    small_pets: bool = False
    medication: bool = False
    key_hold: bool = False
    photo_updates: bool = False
    gps_updates: bool = False
    house_sitting: bool = False
    vet_transport: bool = False
    in_person: bool = False


class TaxiListing(Listing):
    station_eta: str | None = None  # e.g. "5–10 min typical"
    airports: list[str] = []  # IATA codes: LBA, MAN, ...
    fleet: list[str] = []


class VetListing(Listing):
    out_of_hours: Literal["own", "partner", "check"] = "check"
    species: list[str] = []
    satnav: str | None = None
