from .category_repository import CategoryRepository
from .category_user_repository import CategoryUserRepository

__all__ = ["CategoryRepository", "CategoryUserRepository"]
