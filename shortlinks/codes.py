"""Short code generation utilities."""

import random
import string
from typing import Optional


DEFAULT_CODE_LENGTH = 6


class ShortCodeGenerator:
    """Generate random short codes for links."""
    
    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9
    
    def __init__(self, default_length: int = DEFAULT_CODE_LENGTH, rng: Optional[random.Random] = None):
        """Initialize short code generator.
        
        Args:
            default_length: Default length for generated codes
            rng: Optional random source (module-level generator if not given)
        """
        self.default_length = default_length
        self._rng = rng or random
    
    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.
        
        Args:
            length: Length of the code (uses default if not specified).
                A length of 0 yields the empty string.
            
        Returns:
            Random short code
        """
        if length is None:
            length = self.default_length
        return ''.join(self._rng.choices(self.BASE62_CHARS, k=length))
    
    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code consists only of base62 characters."""
        return all(c in ShortCodeGenerator.BASE62_CHARS for c in code)


_default_generator = ShortCodeGenerator()


def generate_short_code() -> str:
    """Generate a code of the default length (6)."""
    return _default_generator.generate_random()


def generate_custom_code(length: int) -> str:
    """Generate a code of exactly ``length`` characters."""
    return _default_generator.generate_random(length)
