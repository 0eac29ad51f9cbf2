import asyncio
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import httpx

from saltaire_guide.exceptions.custom import ListingWebhookError, SignupStorageError
from saltaire_guide.schemas.responses import SignupResponse
from saltaire_guide.schemas.signups import ListingSignup, ListingSignupRequest

logger = logging.getLogger(__name__)

THANKS_MESSAGE = "Thanks — we'll be in touch about your listing."


class ListingWebhookClient:
    """Forwards signups to an automation webhook (Zapier, Make, ...)."""

    def __init__(self, client: httpx.AsyncClient, url: str):
        self._client = client
        self._url = url

    async def forward(self, entry: ListingSignup) -> None:
        try:
            resp = await self._client.post(self._url, json=entry.model_dump(exclude_none=True))
        except httpx.HTTPError as exc:
            raise ListingWebhookError(str(exc) or type(exc).__name__) from exc
        if resp.status_code >= 400:
            raise ListingWebhookError(resp.text, status_code=resp.status_code)


def _read_entries(path: Path) -> list[dict]:
    if not path.exists():
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Signups file %s unreadable, starting a new list", path)
        return []
    if not isinstance(data, list):
        logger.warning("Signups file %s unreadable (not a JSON array), starting a new list", path)
        return []
    return data


class ListingSignupService:
    def __init__(
        self,
        signups_file: str | Path,
        webhook: ListingWebhookClient | None = None,
    ):
        self._path = Path(signups_file)
        self._webhook = webhook
        self._lock = asyncio.Lock()

    async def submit(self, request: ListingSignupRequest) -> SignupResponse:
        if request.hp and request.hp.strip():
            logger.warning("Honeypot filled, dropping signup for %r", request.business)
            return SignupResponse(ok=True, message=THANKS_MESSAGE)

        entry = ListingSignup(
            **request.model_dump(exclude={"hp"}),
            received_at=datetime.now(timezone.utc).isoformat(),
        )
        async with self._lock:
            await asyncio.to_thread(self._append, entry)
        logger.info("Stored listing signup for %r (category=%s)", entry.business, entry.category)

        forwarded = False
        if self._webhook is not None:
            try:
                await self._webhook.forward(entry)
                forwarded = True
            except ListingWebhookError:
                logger.exception("Webhook forwarding failed for %r", entry.business)

        return SignupResponse(ok=True, message=THANKS_MESSAGE, forwarded=forwarded)

    def _append(self, entry: ListingSignup) -> None:
        entries = _read_entries(self._path)
        entries.append(entry.model_dump(exclude_none=True))
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise SignupStorageError(f"{self._path}: {exc}") from exc
