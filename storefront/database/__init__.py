from .async_db import (
    AsyncSessionLocal,
    async_engine,
    atomic,
    get_async_db,
)

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "atomic",
    "get_async_db",
]
