from .categories import router as categories_router

__all__ = ["categories_router"]
