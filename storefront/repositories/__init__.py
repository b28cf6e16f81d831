from .users_repository import UserRepository

__all__ = ["UserRepository"]
