from fastapi import Request

from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore


def get_store(request: Request) -> InMemoryRecordStore:
    """The store instance the application was built with."""
    return request.app.state.store
