from pydantic_settings import BaseSettings

from saltaire_guide.schemas.content import SiteInfo


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    site_name: str = "Saltaire Guide"
    site_url: str = "https://saltaireguide.uk"
    site_email: str = "hello@saltaireguide.uk"
    site_locale: str = "en-GB"
    site_description: str = (
        "The independent guide to Saltaire: history, walks, shops, cafés, parking, and events."
    )
    log_level: str = "INFO"
    listing_webhook_url: str = ""
    signups_file: str = "data/listings-signups.json"
    http_timeout: float = 10.0

    def site(self) -> SiteInfo:
        return SiteInfo(
            name=self.site_name,
            url=self.site_url.rstrip("/"),
            email=self.site_email or None,
            locale=self.site_locale,
            description=self.site_description,
        )
