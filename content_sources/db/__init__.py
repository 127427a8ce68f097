# This project was developed with assistance from AI tools.
from .database import Base, DatabaseService, get_db, get_db_service
from .models import RepositoryConfiguration

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    # Models
    "RepositoryConfiguration",
]
