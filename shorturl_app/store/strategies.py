"""
Address store strategies using Strategy Pattern.
Maps short tokens to the original URLs they redirect to.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional


logger = logging.getLogger(__name__)


class AddressStore(ABC):
    """
    Abstract base class for address stores.
    
    Entries are only ever inserted. There is no delete, no expiry and
    no capacity bound.
    """
    
    @abstractmethod
    def put(self, token: str, url: str) -> None:
        """
        Insert a mapping, overwriting any existing one for the token.
        
        Args:
            token: Short token (store key)
            url: Normalized original URL
        """
        pass
    
    @abstractmethod
    def get(self, token: str) -> Optional[str]:
        """
        Look up the URL for a token.
        
        Args:
            token: Short token
            
        Returns:
            Stored URL or None if the token was never issued
        """
        pass
    
    @abstractmethod
    def __len__(self) -> int:
        pass
    
    def __contains__(self, token: str) -> bool:
        return self.get(token) is not None


class InMemoryAddressStore(AddressStore):
    """
    In-memory address store using a Python dict behind a lock.
    
    Pros:
    - Very fast (no network overhead)
    - No external dependencies
    - Safe to share between request threads
    
    Cons:
    - Not distributed (each process has its own map)
    - Lost on restart
    """
    
    def __init__(self):
        self._urls: Dict[str, str] = {}
        self._lock = threading.Lock()
    
    def put(self, token: str, url: str) -> None:
        with self._lock:
            previous = self._urls.get(token)
            self._urls[token] = url
        if previous is not None:
            logger.warning("Token %s already mapped to %s; overwritten with %s", token, previous, url)
    
    def get(self, token: str) -> Optional[str]:
        with self._lock:
            return self._urls.get(token)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)
