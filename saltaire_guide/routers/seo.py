from datetime import date
from html import escape

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from saltaire_guide.dependencies import DirectoryDep
from saltaire_guide.schemas.directory import DIRECTORY_ROOT
from saltaire_guide.schemas.responses import HealthResponse

router = APIRouter()

HUB_PRIORITY = "0.8"
CATEGORY_PRIORITY = "0.7"


def build_sitemap(urls: list[tuple[str, str]], lastmod: str) -> str:
    entries = "".join(
        f"<url><loc>{escape(loc)}</loc><lastmod>{lastmod}</lastmod>"
        f"<changefreq>monthly</changefreq><priority>{priority}</priority></url>"
        for loc, priority in urls
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{entries}</urlset>'
    )


@router.get("/sitemap.xml")
async def sitemap(service: DirectoryDep) -> Response:
    base = service.site.url
    urls = [(f"{base}{DIRECTORY_ROOT}", HUB_PRIORITY)]
    urls += [(f"{base}{c.path}", CATEGORY_PRIORITY) for c in service.categories()]
    return Response(build_sitemap(urls, date.today().isoformat()), media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(service: DirectoryDep) -> str:
    base = service.site.url
    return f"User-agent: *\nAllow: /\nSitemap: {base}/sitemap.xml\nHost: {base}\n"


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
