from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from saltaire_guide.schemas.content import Faq
from saltaire_guide.schemas.directory import ComparisonTable


class CategorySummary(BaseModel):
    slug: str
    label: str
    path: str
    group: str
    listings: int
    featured: int


class DirectoryPageResponse(BaseModel):
    slug: str
    label: str
    page_url: str
    featured: list[str]
    others: list[str]
    table: ComparisonTable
    faqs: list[Faq]
    structured_data: list[dict[str, Any]]


class SignupResponse(BaseModel):
    ok: bool
    message: str
    forwarded: bool = False


class HealthResponse(BaseModel):
    status: str
