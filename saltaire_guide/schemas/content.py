from pydantic import BaseModel


class SiteInfo(BaseModel):
    name: str
    url: str
    email: str | None = None
    locale: str = "en-GB"
    description: str | None = None


class Faq(BaseModel):
    q: str
    a: str


class HowTo(BaseModel):
    name: str
    total_time: str | None = None  # ISO 8601 duration, e.g. "PT2M"
    steps: list[str] = []


class Crumb(BaseModel):
    name: str
    path: str
