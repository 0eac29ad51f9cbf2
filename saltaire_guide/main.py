import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from saltaire_guide.config import Settings
from saltaire_guide.content.registry import CATEGORIES
from saltaire_guide.exceptions.custom import (
    CategoryNotFoundError,
    DirectoryConfigError,
    ListingWebhookError,
    SignupStorageError,
)
from saltaire_guide.exceptions.handlers import (
    category_not_found_handler,
    directory_config_error_handler,
    listing_webhook_error_handler,
    signup_storage_error_handler,
)
from saltaire_guide.routers.directory import router as directory_router
from saltaire_guide.routers.seo import router as seo_router
from saltaire_guide.routers.signups import router as signups_router
from saltaire_guide.services.directory import DirectoryService
from saltaire_guide.services.signups import ListingSignupService, ListingWebhookClient


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        app.state.directory_service = DirectoryService(settings.site(), CATEGORIES)

        webhook: ListingWebhookClient | None = None
        if settings.listing_webhook_url:
            webhook = ListingWebhookClient(client, settings.listing_webhook_url)
        app.state.signup_service = ListingSignupService(settings.signups_file, webhook=webhook)

        yield


app = FastAPI(title="Saltaire Guide", lifespan=lifespan)

app.add_exception_handler(CategoryNotFoundError, category_not_found_handler)
app.add_exception_handler(DirectoryConfigError, directory_config_error_handler)
app.add_exception_handler(SignupStorageError, signup_storage_error_handler)
app.add_exception_handler(ListingWebhookError, listing_webhook_error_handler)

app.include_router(directory_router)
app.include_router(signups_router)
app.include_router(seo_router)
