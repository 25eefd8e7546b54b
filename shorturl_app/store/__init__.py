"""
Address store module for URL shortener.
Implements Strategy Pattern for the token -> URL mapping.
"""

from .strategies import AddressStore, InMemoryAddressStore
from .factory import StoreFactory, StoreBackend

__all__ = [
    "AddressStore",
    "InMemoryAddressStore",
    "StoreFactory",
    "StoreBackend",
]
