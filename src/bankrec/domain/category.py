"""Category domain service."""

from typing import Optional
from bankrec.database.base import Database
from bankrec.domain.entities import Category as CategoryEntity
from bankrec.domain.errors import ConflictError, NotFoundError, ValidationError


class CategoryService:
    """Service for managing categories assigned to imported transactions."""

    def __init__(self, db: Database):
        self.db = db

    def create_category(self, name: str) -> int:
        """Create a category and return its ID.

        Raises:
            ValidationError: If the name is blank
            ConflictError: If a category with that name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(f"Category '{name}' already exists")
        return self.db.create_category(name=name)

    def get_category(self, category_id: int) -> Optional[CategoryEntity]:
        return self.db.get_category(category_id)

    def require_category_by_name(self, name: str) -> CategoryEntity:
        """Get a category by name, raising NotFoundError if missing."""
        category = self.db.get_category_by_name(name)
        if category is None:
            raise NotFoundError(f"Category '{name}' not found")
        return category

    def list_categories(self) -> list[CategoryEntity]:
        return self.db.list_categories()
