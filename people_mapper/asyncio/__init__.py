from .mapper import AsyncPersonMapper
from .database import AsyncDatabase

__all__ = [
    "AsyncPersonMapper",
    "AsyncDatabase",
]
