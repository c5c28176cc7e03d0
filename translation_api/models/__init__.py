"""SQLAlchemy ORM models.

Individual models should be imported explicitly:
    from translation_api.models.translation import Translation

All models are imported here so Alembic can detect them during migration
autogenerate. This module is imported by alembic/env.py.
"""

from translation_api.models.translation import Translation

__all__ = [
    "Translation",
]
