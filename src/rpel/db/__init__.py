"""
rpel.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM mappings, engine/session setup, and repositories.
"""

# Package marker.
