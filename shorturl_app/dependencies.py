"""
FastAPI dependencies for dependency injection.

The address store is created once and shared by every request handler.
Tests replace it through app.dependency_overrides[get_address_store].
"""

from functools import lru_cache

from fastapi import Depends

from shorturl_app.config import settings
from shorturl_app.services.url_service import URLService
from shorturl_app.store.factory import StoreFactory, StoreBackend
from shorturl_app.store.strategies import AddressStore


@lru_cache()
def get_address_store() -> AddressStore:
    """
    Get address store instance (singleton).
    
    @lru_cache ensures this is called only once per process.
    
    Returns:
        AddressStore instance based on settings
    """
    backend = StoreBackend(settings.store_backend)
    return StoreFactory.create(backend)


def get_url_service(store: AddressStore = Depends(get_address_store)) -> URLService:
    """Get URLService bound to the shared address store"""
    return URLService(store=store)
