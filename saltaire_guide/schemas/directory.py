from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel

from saltaire_guide.schemas.content import Crumb, Faq, HowTo
from saltaire_guide.schemas.listings import Listing

DIRECTORY_ROOT = "/local-services"


class BadgeSpec(BaseModel):
    flag: str
    label: str


class Column(BaseModel):
    header: str
    value: Callable[[Listing], str]
    flags: list[str] = []  # listing fields the accessor reads


class DirectoryCategory(BaseModel):
    slug: str
    label: str
    title: str
    description: str
    blurb: str = ""
    group: str = "Home & Trades"
    entity_type: str = "LocalBusiness"
    listings: list[Listing] = []
    badges: list[BadgeSpec] = []
    columns: list[Column] = []
    ld_properties: list[str] = []
    ld_list_properties: list[tuple[str, str]] = []
    faqs: list[Faq] = []
    how_tos: list[HowTo] = []
    offer_name: str | None = None
    speakable: list[str] = ["#featured-title", "#faq-title"]

    @property
    def path(self) -> str:
        return f"{DIRECTORY_ROOT}/{self.slug}"


class ComparisonRow(BaseModel):
    slug: str
    name: str
    anchor: str
    featured: bool = False
    cells: list[str] = []


class ComparisonTable(BaseModel):
    headers: list[str]
    rows: list[ComparisonRow] = []


class DirectoryPageView(BaseModel):
    category: DirectoryCategory
    page_url: str
    crumbs: list[Crumb]
    featured: list[Listing]
    others: list[Listing]
    table: ComparisonTable
    structured_data: list[dict[str, Any]]
