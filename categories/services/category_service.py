import logging
from typing import Callable, List, Optional
from uuid import UUID

from app.core.config import web_base_uri
from categories.domain.entities.category import CategoryOut, decode_category
from categories.domain.models.category import Category
from categories.domain.slug import derive_slug
from categories.errors import EmptyCollectionError, NotFoundError, PersistenceError
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.batch import decode_rows

logger = logging.getLogger(__name__)


def category_uri(uri_base: str, slug: str) -> str:
    return f"{uri_base}/categories/{slug}"


class CategoryService:
    """
    Get-or-create and point lookups over the categories table.

    Name uniqueness is a convention kept by checking before inserting; two
    concurrent creates of the same name can both insert.
    """

    def __init__(
        self,
        repo: AbstractRepository,                       # CategoryRepository
        base_uri: Callable[[], str] = web_base_uri,
    ):
        self.repo = repo
        self.base_uri = base_uri

    # ---------- Mutations ----------

    async def get_or_create(self, name: str, uri_base: Optional[str] = None) -> CategoryOut:
        existing = await self.repo.get_by_name(name)
        if existing is not None:
            logger.debug(f"Category '{name}' already exists", extra={"category_id": existing.id})
            return decode_category(existing)

        slug = derive_slug(name)
        base = uri_base if uri_base is not None else self.base_uri()
        await self.repo.insert(Category(name=name, slug=slug, uri=category_uri(base, slug)))

        # return what the database holds, not the object we built
        stored = await self.repo.get_by_name(name)
        if stored is None:
            raise PersistenceError(f"Category '{name}' missing after insert")
        logger.info(f"Created category '{name}'", extra={"category_id": stored.id, "slug": slug})
        return decode_category(stored)

    # ---------- Queries ----------

    async def get_by_id(self, category_id: UUID) -> CategoryOut:
        row = await self.repo.get(category_id)
        if row is None:
            raise NotFoundError(f"Category {category_id} not found")
        return decode_category(row)

    async def get_by_slug(self, slug: str) -> CategoryOut:
        row = await self.repo.get_by_slug(slug)
        if row is None:
            raise NotFoundError(f"Category with slug '{slug}' not found")
        return decode_category(row)

    async def list_all(self) -> List[CategoryOut]:
        batch = decode_rows(await self.repo.list_all(), decode_category)
        if batch.skipped:
            logger.warning(f"Skipped {len(batch.skipped)} undecodable categories", extra={"skipped": len(batch.skipped)})
        if not batch.items:
            raise EmptyCollectionError()
        return batch.items
