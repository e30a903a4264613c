import pytest
from types import SimpleNamespace
from uuid import uuid4
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from categories.domain.models.category import Category
from categories.domain.repositories import CategoryRepository
from categories.errors import EmptyCollectionError, NotFoundError, PersistenceError
from categories.services.category_service import CategoryService


def _svc(db: AsyncSession) -> CategoryService:
    return CategoryService(CategoryRepository(db))


# ---------------------------
# Fakes (drive failure paths the database cannot produce on demand)
# ---------------------------

class _FailingInsertRepo:
    async def get_by_name(self, name):
        return None

    async def insert(self, obj):
        raise PersistenceError("Failed to insert into categories")


class _VanishingRepo:
    """Insert succeeds but the re-read finds nothing."""

    def __init__(self):
        self.inserted = []

    async def get_by_name(self, name):
        return None

    async def insert(self, obj):
        self.inserted.append(obj)
        return obj


class _ListRepo:
    def __init__(self, rows):
        self.rows = rows

    async def list_all(self):
        return self.rows


# ==============================================================================
# get_or_create
# ==============================================================================

@pytest.mark.asyncio
async def test_should_create_category_with_slug_and_uri(db_session: AsyncSession, base_uri: str):
    # WHEN
    cat = await _svc(db_session).get_or_create("Travel")

    # THEN
    assert cat.name == "Travel"
    assert cat.slug == "travel"
    assert cat.uri == f"{base_uri}/categories/travel"

    row = (await db_session.execute(select(Category).where(Category.id == cat.id))).scalars().first()
    assert row is not None
    assert row.slug == "travel"


@pytest.mark.asyncio
async def test_should_use_explicit_uri_base_when_given(db_session: AsyncSession):
    cat = await _svc(db_session).get_or_create("中文 Music", uri_base="https://other.test")
    assert cat.slug == "zhong-wen-music"
    assert cat.uri == "https://other.test/categories/zhong-wen-music"


@pytest.mark.asyncio
async def test_should_return_same_category_when_created_twice(db_session: AsyncSession):
    # GIVEN
    svc = _svc(db_session)
    first = await svc.get_or_create("Music")

    # WHEN: second call, even with a different base, changes nothing
    second = await svc.get_or_create("Music", uri_base="https://elsewhere.test")

    # THEN
    assert second.id == first.id
    assert second.slug == first.slug
    assert second.uri == first.uri
    count = (await db_session.execute(select(func.count()).select_from(Category))).scalar_one()
    assert count == 1


@pytest.mark.asyncio
async def test_should_treat_names_case_sensitively(db_session: AsyncSession):
    svc = _svc(db_session)
    a = await svc.get_or_create("Music")
    b = await svc.get_or_create("music")
    assert a.id != b.id
    assert a.slug == b.slug == "music"


@pytest.mark.asyncio
async def test_should_propagate_persistence_failure():
    svc = CategoryService(_FailingInsertRepo(), base_uri=lambda: "https://cms.test")
    with pytest.raises(PersistenceError):
        await svc.get_or_create("Travel")


@pytest.mark.asyncio
async def test_should_fail_when_row_missing_after_insert():
    repo = _VanishingRepo()
    svc = CategoryService(repo, base_uri=lambda: "https://cms.test")

    with pytest.raises(PersistenceError):
        await svc.get_or_create("Travel")
    assert len(repo.inserted) == 1


# ==============================================================================
# Point lookups
# ==============================================================================

@pytest.mark.asyncio
async def test_should_get_category_by_id_and_slug(db_session: AsyncSession):
    svc = _svc(db_session)
    cat = await svc.get_or_create("Street Food")

    assert (await svc.get_by_id(cat.id)) == cat
    assert (await svc.get_by_slug("street-food")) == cat


@pytest.mark.asyncio
async def test_should_raise_not_found_for_unknown_id(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await _svc(db_session).get_by_id(uuid4())


@pytest.mark.asyncio
async def test_should_raise_not_found_for_unknown_slug(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await _svc(db_session).get_by_slug("nope")


# ==============================================================================
# list_all
# ==============================================================================

@pytest.mark.asyncio
async def test_should_raise_empty_collection_when_no_categories(db_session: AsyncSession):
    with pytest.raises(EmptyCollectionError) as exc:
        await _svc(db_session).list_all()

    assert exc.value.code == "8-all-categories"
    assert exc.value.details == "No records"


@pytest.mark.asyncio
async def test_should_list_every_category(db_session: AsyncSession):
    svc = _svc(db_session)
    for name in ("Travel", "Music", "Food"):
        await svc.get_or_create(name)

    cats = await svc.list_all()
    assert {c.name for c in cats} == {"Travel", "Music", "Food"}


@pytest.mark.asyncio
async def test_should_skip_malformed_rows_when_listing():
    # GIVEN: one good row and one missing its slug
    good = SimpleNamespace(id=uuid4(), name="Travel", slug="travel", uri="https://cms.test/categories/travel")
    bad = SimpleNamespace(id=uuid4(), name="Broken", slug=None, uri="https://cms.test/categories/")

    # WHEN
    cats = await CategoryService(_ListRepo([good, bad])).list_all()

    # THEN
    assert [c.name for c in cats] == ["Travel"]


@pytest.mark.asyncio
async def test_should_raise_empty_collection_when_every_row_is_malformed():
    bad = SimpleNamespace(id=uuid4(), name=None, slug=None, uri=None)
    with pytest.raises(EmptyCollectionError):
        await CategoryService(_ListRepo([bad])).list_all()


@pytest.mark.asyncio
async def test_should_raise_persistence_error_when_database_rejects_insert(db_session: AsyncSession):
    # GIVEN: a repository that drops the uri before inserting (uri is NOT NULL)
    class _NullUri(CategoryRepository):
        async def insert(self, obj):
            obj.uri = None
            return await super().insert(obj)

    svc = CategoryService(_NullUri(db_session))

    # WHEN / THEN
    with pytest.raises(PersistenceError):
        await svc.get_or_create("Travel")

    count = (await db_session.execute(select(func.count()).select_from(Category))).scalar_one()
    assert count == 0
