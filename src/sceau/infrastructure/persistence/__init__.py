"""
Database persistence.
"""

from sceau.infrastructure.persistence.database import Database
from sceau.infrastructure.persistence.models import Base

__all__ = ["Database", "Base"]
