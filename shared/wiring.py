from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from categories.adapters.user_lookup_inprocess import UserLookupInProcessAdapter
from categories.domain.repositories import CategoryRepository, CategoryUserRepository
from categories.ports.user_lookup_port import UserLookupPort
from categories.services.category_service import CategoryService
from categories.services.category_user_service import CategoryUserService
from categories.services.user_categories_service import UserCategoriesService
from users.repositories.user_repository import UserRepository
from users.services.user_service import UserService


def get_category_service(db: AsyncSession = Depends(get_session)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


def get_category_user_service(db: AsyncSession = Depends(get_session)) -> CategoryUserService:
    return CategoryUserService(CategoryUserRepository(db))


def get_user_lookup(db: AsyncSession = Depends(get_session)) -> UserLookupPort:
    return UserLookupInProcessAdapter(UserService(UserRepository(db)))


def get_user_categories_service(
    db: AsyncSession = Depends(get_session),
    users: UserLookupPort = Depends(get_user_lookup),
) -> UserCategoriesService:
    """
    Aggregator wired so that association, category and user reads share ONE
    DB session.
    """
    return UserCategoriesService(
        links=CategoryUserService(CategoryUserRepository(db)),
        categories_repo=CategoryRepository(db),
        users=users,
    )
