"""Shared dependencies for API routes."""

from services.storage import MemoryStorage, get_storage


def get_record_storage() -> MemoryStorage:
    return get_storage()
