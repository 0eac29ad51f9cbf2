import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from saltaire_guide.dependencies import DirectoryDep
from saltaire_guide.schemas.responses import CategorySummary, DirectoryPageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/local-services", response_class=HTMLResponse)
async def local_services_hub(service: DirectoryDep) -> HTMLResponse:
    return HTMLResponse(service.render_hub())


@router.get("/local-services/{category}", response_class=HTMLResponse)
async def directory_page(category: str, service: DirectoryDep) -> HTMLResponse:
    return HTMLResponse(service.render_page(category))


@router.get("/api/local-services", response_model=list[CategorySummary])
async def list_categories(service: DirectoryDep) -> list[CategorySummary]:
    return [
        CategorySummary(
            slug=c.slug,
            label=c.label,
            path=c.path,
            group=c.group,
            listings=len(c.listings),
            featured=sum(1 for l in c.listings if l.featured),
        )
        for c in service.categories()
    ]


@router.get("/api/local-services/{category}", response_model=DirectoryPageResponse)
async def directory_data(category: str, service: DirectoryDep) -> DirectoryPageResponse:
    view = service.build_view(category)
    return DirectoryPageResponse(
        slug=view.category.slug,
        label=view.category.label,
        page_url=view.page_url,
        featured=[l.slug for l in view.featured],
        others=[l.slug for l in view.others],
        table=view.table,
        faqs=view.category.faqs,
        structured_data=view.structured_data,
    )
