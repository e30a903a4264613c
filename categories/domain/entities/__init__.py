from .category import (
    CategoryCreate,
    CategoryOut,
    CategoryUserCreate,
    CategoryUserOut,
    decode_category,
    decode_category_user,
)

__all__ = [
    "CategoryCreate",
    "CategoryOut",
    "CategoryUserCreate",
    "CategoryUserOut",
    "decode_category",
    "decode_category_user",
]
