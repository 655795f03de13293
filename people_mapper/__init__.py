from .base.entity import Person, Persisted, UNSAVED
from .base.mapper import PersonMapper
from .base.database import Database
from .errors import PeopleMapperError, UnsavedEntityError, AlreadySavedError, UnknownFieldError, DataIntegrityError

__all__ = [
    "Person",
    "Persisted",
    "UNSAVED",
    "PersonMapper",
    "Database",
    "PeopleMapperError",
    "UnsavedEntityError",
    "AlreadySavedError",
    "UnknownFieldError",
    "DataIntegrityError",
]

__version__ = '0.1.0'
