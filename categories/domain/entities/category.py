from pydantic import BaseModel, ValidationError, constr
from uuid import UUID

from categories.errors import DecodeError


class CategoryCreate(BaseModel):
    name: constr(min_length=1, max_length=255)

    model_config = {
        "json_schema_extra": {"example": {"name": "Travel"}}
    }


class CategoryOut(BaseModel):
    id: UUID
    name: str
    slug: str
    uri: str

    class Config:
        from_attributes = True


class CategoryUserCreate(BaseModel):
    user_id: UUID
    category_id: UUID


class CategoryUserOut(BaseModel):
    id: UUID
    user_id: UUID
    category_id: UUID

    class Config:
        from_attributes = True


def decode_category(row) -> CategoryOut:
    try:
        return CategoryOut.model_validate(row)
    except ValidationError as e:
        raise DecodeError("Malformed category row", details=str(e)) from e


def decode_category_user(row) -> CategoryUserOut:
    try:
        return CategoryUserOut.model_validate(row)
    except ValidationError as e:
        raise DecodeError("Malformed category_user row", details=str(e)) from e
