"""Domain store for gym-helper."""

from .domain_store import DomainStore, StoreEvent, StoreListener

__all__ = ["DomainStore", "StoreEvent", "StoreListener"]
