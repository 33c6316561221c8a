"""ORM model registry — imports every mapper module so each class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from catalog.infrastructure.persistence.models.categories import Category

__all__ = [
    "Category",
]
