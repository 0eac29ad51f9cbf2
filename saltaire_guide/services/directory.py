import logging
from collections.abc import Iterable

from saltaire_guide.exceptions.custom import CategoryNotFoundError, DirectoryConfigError
from saltaire_guide.mappers.compare_table import project_table
from saltaire_guide.mappers.page_audit import audit_directory_page
from saltaire_guide.mappers.page_builder import RESERVED_IDS, build_directory_page, build_hub_page
from saltaire_guide.mappers.partition import partition_listings
from saltaire_guide.mappers.structured_data import (
    breadcrumb_list,
    directory_structured_data,
    item_list,
    organization,
    web_page,
    website,
)
from saltaire_guide.schemas.content import Crumb, SiteInfo
from saltaire_guide.schemas.directory import DIRECTORY_ROOT, DirectoryCategory, DirectoryPageView

logger = logging.getLogger(__name__)


def _crumbs(category: DirectoryCategory) -> list[Crumb]:
    return [
        Crumb(name="Home", path="/"),
        Crumb(name="Local services", path=DIRECTORY_ROOT),
        Crumb(name=category.label, path=category.path),
    ]


def _validate(category: DirectoryCategory) -> None:
    seen: set[str] = set()
    for listing in category.listings:
        if listing.slug in seen:
            raise DirectoryConfigError(f"duplicate listing slug '{listing.slug}'", category.slug)
        if listing.slug in RESERVED_IDS:
            raise DirectoryConfigError(f"listing slug '{listing.slug}' is a page section id", category.slug)
        seen.add(listing.slug)

    referenced = [b.flag for b in category.badges]
    referenced += [flag for column in category.columns for flag in column.flags]
    referenced += category.ld_properties
    referenced += [field for field, _ in category.ld_list_properties]
    for listing in category.listings:
        missing = [flag for flag in referenced if flag not in type(listing).model_fields]
        if missing:
            raise DirectoryConfigError(
                f"listing '{listing.slug}' has no field(s) {', '.join(sorted(set(missing)))}",
                category.slug,
            )


class DirectoryService:
    def __init__(self, site: SiteInfo, categories: Iterable[DirectoryCategory] = ()):
        self._site = site
        self._categories: dict[str, DirectoryCategory] = {}
        for category in categories:
            self.register(category)

    @property
    def site(self) -> SiteInfo:
        return self._site

    def register(self, category: DirectoryCategory) -> None:
        if category.slug in self._categories:
            raise DirectoryConfigError("category registered twice", category.slug)
        _validate(category)

        view = self._build(category)
        problems = audit_directory_page(build_directory_page(view, self._site), view.page_url)
        if problems:
            raise DirectoryConfigError("; ".join(problems), category.slug)

        self._categories[category.slug] = category
        logger.debug("Registered category %s (%d listings)", category.slug, len(category.listings))

    def get(self, slug: str) -> DirectoryCategory:
        category = self._categories.get(slug)
        if category is None:
            raise CategoryNotFoundError(slug)
        return category

    def categories(self) -> list[DirectoryCategory]:
        return list(self._categories.values())

    def groups(self) -> dict[str, list[DirectoryCategory]]:
        grouped: dict[str, list[DirectoryCategory]] = {}
        for category in self._categories.values():
            grouped.setdefault(category.group, []).append(category)
        return grouped

    def _build(self, category: DirectoryCategory) -> DirectoryPageView:
        featured, others = partition_listings(category.listings)
        crumbs = _crumbs(category)
        return DirectoryPageView(
            category=category,
            page_url=f"{self._site.url}{category.path}",
            crumbs=crumbs,
            featured=featured,
            others=others,
            table=project_table(category.listings, category.columns),
            structured_data=directory_structured_data(category, self._site, crumbs, featured),
        )

    def build_view(self, slug: str) -> DirectoryPageView:
        return self._build(self.get(slug))

    def render_page(self, slug: str) -> str:
        view = self.build_view(slug)
        logger.info(
            "Rendering %s: %d featured, %d other listings",
            slug, len(view.featured), len(view.others),
        )
        return build_directory_page(view, self._site)

    def hub_structured_data(self) -> list[dict]:
        hub_url = f"{self._site.url}{DIRECTORY_ROOT}"
        crumbs = [Crumb(name="Home", path="/"), Crumb(name="Local services", path=DIRECTORY_ROOT)]
        entries = [(c.label, f"{self._site.url}{c.path}", c.blurb or None) for c in self._categories.values()]
        return [
            website(self._site),
            organization(self._site),
            web_page(self._site, "Local services in Saltaire & Shipley", hub_url),
            breadcrumb_list(self._site, crumbs),
            item_list("Local services in Saltaire", entries),
        ]

    def render_hub(self) -> str:
        return build_hub_page(self.groups(), self._site, self.hub_structured_data())
