"""Implementaciones in-memory para desarrollo y testing."""

from app.infrastructure.in_memory.object_storage import InMemoryObjectStorage
from app.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo

__all__ = [
    "InMemoryReservationRepo",
    "InMemoryObjectStorage",
]
