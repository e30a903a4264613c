from .category import Category
from .category_user import CategoryUser

__all__ = ["Category", "CategoryUser"]
