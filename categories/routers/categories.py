from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Path

from categories.domain.entities.category import (
    CategoryCreate,
    CategoryOut,
    CategoryUserCreate,
    CategoryUserOut,
)
from categories.services.category_service import CategoryService
from categories.services.category_user_service import CategoryUserService
from categories.services.user_categories_service import UserCategoriesService
from shared.wiring import (
    get_category_service,
    get_category_user_service,
    get_user_categories_service,
)

router = APIRouter(prefix="/v1/categories", tags=["categories"])

_category_example = {
    "id": "7e6f5a20-5a62-4e25-9b02-8a8af5f1a901",
    "name": "Travel",
    "slug": "travel",
    "uri": "http://localhost:8000/categories/travel",
}

_not_found = {
    "description": "No category matches the identifier.",
    "content": {
        "application/json": {
            "examples": {
                "missing": {
                    "value": {"error": {"code": "CATEGORY_NOT_FOUND", "message": "Category with slug 'x' not found"}}
                }
            }
        }
    },
}


# ==============================================================================
# Mutations
# ==============================================================================

@router.post(
    "",
    summary="Get or create a category",
    description=(
        "Returns the category with this exact `name`, creating it first when absent.\n\n"
        "### Notes\n"
        "- Idempotent: a second call with the same name returns the stored category unchanged.\n"
        "- `slug` is derived from the name; words in Chinese script are replaced by the pinyin "
        "of their first character.\n"
        "- `uri` is `{web_base_uri}/categories/{slug}`.\n"
    ),
    response_model=CategoryOut,
    responses={
        200: {
            "description": "Existing or newly created category.",
            "content": {"application/json": {"examples": {"travel": {"value": _category_example}}}},
        },
        500: {"description": "The insert failed."},
    },
)
async def create_category(
    payload: CategoryCreate,
    svc: CategoryService = Depends(get_category_service),
):
    return await svc.get_or_create(payload.name)


@router.post(
    "/users",
    summary="Link a user to a category",
    description=(
        "Returns the association for `(user_id, category_id)`, creating it first when absent.\n\n"
        "Identifiers are stored as given; neither side is checked for existence."
    ),
    response_model=CategoryUserOut,
)
async def link_category_user(
    payload: CategoryUserCreate,
    svc: CategoryUserService = Depends(get_category_user_service),
):
    return await svc.get_or_create(payload.user_id, payload.category_id)


# ==============================================================================
# Queries
# ==============================================================================

@router.get(
    "",
    summary="List every category",
    description="Returns all categories. An empty table answers `404` with code `8-all-categories`.",
    response_model=List[CategoryOut],
    responses={
        404: {
            "description": "No categories exist yet.",
            "content": {
                "application/json": {
                    "examples": {
                        "empty": {
                            "value": {
                                "error": {
                                    "code": "8-all-categories",
                                    "message": "No categories exist",
                                    "details": "No records",
                                }
                            }
                        }
                    }
                }
            },
        },
    },
)
async def list_categories(svc: CategoryService = Depends(get_category_service)):
    return await svc.list_all()


@router.get(
    "/slug/{slug}",
    summary="Get a category by slug",
    response_model=CategoryOut,
    responses={404: _not_found},
)
async def get_category_by_slug(
    slug: str = Path(..., description="Category slug"),
    svc: CategoryService = Depends(get_category_service),
):
    return await svc.get_by_slug(slug)


@router.get(
    "/user/{user_id}",
    summary="Categories linked to a user",
    description="Returns the categories reachable through the user's associations; `[]` when there are none.",
    response_model=List[CategoryOut],
)
async def list_categories_for_user(
    user_id: UUID = Path(..., description="User UUID"),
    svc: UserCategoriesService = Depends(get_user_categories_service),
):
    return await svc.categories_for_user(user_id)


@router.get(
    "/username/{username}",
    summary="Categories linked to a username",
    response_model=List[CategoryOut],
    responses={404: {"description": "Unknown username (code `USER_NOT_FOUND`)."}},
)
async def list_categories_for_username(
    username: str = Path(..., description="Username"),
    svc: UserCategoriesService = Depends(get_user_categories_service),
):
    return await svc.categories_for_username(username)


@router.get(
    "/{category_id}",
    summary="Get a category by id",
    response_model=CategoryOut,
    responses={404: _not_found},
)
async def get_category(
    category_id: UUID = Path(..., description="Category UUID"),
    svc: CategoryService = Depends(get_category_service),
):
    return await svc.get_by_id(category_id)
