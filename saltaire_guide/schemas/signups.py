from pydantic import BaseModel, Field


class ListingSignupRequest(BaseModel):
    business: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    category: str | None = None
    phone: str | None = None
    website: str | None = None
    message: str | None = Field(default=None, max_length=2000)
    hp: str | None = None  # honeypot, left empty by real users


class ListingSignup(BaseModel):
    business: str
    email: str
    category: str | None = None
    phone: str | None = None
    website: str | None = None
    message: str | None = None
    received_at: str
