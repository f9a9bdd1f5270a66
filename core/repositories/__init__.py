from .base import BaseRepository, parse_uuid

__all__ = ["BaseRepository", "parse_uuid"]
