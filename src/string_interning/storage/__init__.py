"""存储层。"""

from __future__ import annotations

from ..config import InternerConfig
from .in_memory import InMemoryStore


def create_store(config: InternerConfig, capacity: int | None = None) -> InMemoryStore:
    if capacity is None:
        capacity = config.default_capacity
    return InMemoryStore(min(capacity, config.max_entries))


__all__ = ["InMemoryStore", "create_store"]
