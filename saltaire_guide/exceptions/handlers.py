import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    CategoryNotFoundError,
    DirectoryConfigError,
    ListingWebhookError,
    SignupStorageError,
)

logger = logging.getLogger(__name__)


async def category_not_found_handler(_request: Request, exc: CategoryNotFoundError) -> JSONResponse:
    logger.warning("Category not found: %s", exc.slug)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message},
    )


async def directory_config_error_handler(_request: Request, exc: DirectoryConfigError) -> JSONResponse:
    logger.error("Directory config error: %s (category=%s)", exc.message, exc.category)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Directory misconfigured: {exc.message}"},
    )


async def signup_storage_error_handler(_request: Request, exc: SignupStorageError) -> JSONResponse:
    logger.error("Signup storage error: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content={"detail": "Could not store listing signup"},
    )


async def listing_webhook_error_handler(_request: Request, exc: ListingWebhookError) -> JSONResponse:
    logger.error("Listing webhook error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Listing webhook error: {exc.message}"},
    )
