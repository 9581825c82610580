from .json_store import JsonMatchRepository

__all__ = ["JsonMatchRepository"]
