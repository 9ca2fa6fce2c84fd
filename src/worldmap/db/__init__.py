"""Database layer for WorldMap: SQLAlchemy 2.0 async."""

from __future__ import annotations

from worldmap.db.base import Base
from worldmap.db.engine import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
