"""Client modules for external system communication."""
from .database_client import DatabaseClient, DatabaseConnectionError

__all__ = [
    'DatabaseClient',
    'DatabaseConnectionError',
]
