"""
Factory for creating address store instances.
"""

import logging
from enum import Enum

from .strategies import AddressStore, InMemoryAddressStore


logger = logging.getLogger(__name__)


class StoreBackend(Enum):
    """Available address store backends"""
    MEMORY = "memory"


class StoreFactory:
    """
    Simple factory for creating address store instances.
    
    Returns a fresh store on every call. The application-wide instance
    is held by dependencies.get_address_store.
    """
    
    @classmethod
    def create(cls, backend: StoreBackend) -> AddressStore:
        """
        Create a new store instance.
        
        Args:
            backend: Type of store backend (from enum)
            
        Returns:
            Empty address store
        """
        if backend == StoreBackend.MEMORY:
            store = InMemoryAddressStore()
            logger.info("In-memory address store initialized")
            return store
        
        raise ValueError(f"Unknown store backend: {backend}")
