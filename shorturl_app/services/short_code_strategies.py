"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import base64
import math
import secrets
import string
from abc import ABC, abstractmethod


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""
    
    @abstractmethod
    def generate(self) -> str:
        """
        Generate a short code.
        
        Returns:
            A short code string of fixed length. Uniqueness is not checked.
        """
        pass


class SecureRandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random bytes encoded with the URL-safe base64 alphabet.
    
    Draws num_bytes from the OS CSPRNG, encodes them, strips the '=' padding
    and keeps the first `length` characters. The unpadded encoding of N bytes
    is ceil(4N/3) characters long, so every token is exactly `length`
    characters from [A-Za-z0-9_-].
    
    Pros: Unpredictable, no shared state
    Cons: Collisions are possible and not detected
    """
    
    def __init__(self, num_bytes: int = 6, length: int = 6):
        max_length = self.encoded_length(num_bytes)
        if length < 1 or length > max_length:
            raise ValueError(
                f"Token length {length} is out of range for {num_bytes} random bytes "
                f"(must be between 1 and {max_length})."
            )
        self.num_bytes = num_bytes
        self.length = length
    
    @staticmethod
    def encoded_length(num_bytes: int) -> int:
        """Number of unpadded base64 characters produced by num_bytes bytes"""
        return math.ceil(num_bytes * 4 / 3)
    
    def generate(self) -> str:
        """Generate a URL-safe token of exactly self.length characters"""
        raw = secrets.token_bytes(self.num_bytes)
        encoded = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
        return encoded[:self.length]


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Random Base62 strategy.
    Picks each character independently from 0-9a-zA-Z with secrets.choice.
    
    Pros: Alphanumeric only (no '-' or '_'), any length
    Cons: Collisions are possible and not detected
    """
    
    BASE62_CHARS = string.digits + string.ascii_lowercase + string.ascii_uppercase
    
    def __init__(self, length: int = 6):
        if length < 1:
            raise ValueError(f"Token length must be positive, got {length}")
        self.length = length
    
    def generate(self) -> str:
        """Generate a Base62 token of exactly self.length characters"""
        return ''.join(secrets.choice(self.BASE62_CHARS) for _ in range(self.length))
