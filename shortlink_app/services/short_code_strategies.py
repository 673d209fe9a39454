"""
Short code generation strategies for the link shortener.
Uses Strategy Pattern so the allocation algorithm can be swapped out.
"""

import logging
import secrets
import string
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from shortlink_app.models.link import Link
from shortlink_app.services.exceptions import ShortCodeExhausted

logger = logging.getLogger(__name__)


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""
    
    @abstractmethod
    def generate(self, db_session: Session) -> str:
        """
        Generate a short code.
        
        Args:
            db_session: Database session used to check uniqueness
            
        Returns:
            A short code not present in the links table at call time
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random generation with collision checking.
    
    Each candidate costs one point lookup. After `max_attempts` collisions
    at the current length the code grows by one character, up to
    `max_length`. Running out at the maximum length raises
    ShortCodeExhausted instead of looping forever.
    """
    
    def __init__(
        self,
        length: int = 6,
        alphabet: str = string.ascii_letters + string.digits,
        max_attempts: int = 10,
        max_length: Optional[int] = None,
        reserved: Iterable[str] = ()
    ):
        if length < 1:
            raise ValueError("length must be at least 1")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self.length = length
        self.alphabet = alphabet
        self.max_attempts = max_attempts
        self.max_length = max(max_length or length, length)
        self.reserved = frozenset(reserved)
    
    def generate(self, db_session: Session) -> str:
        """Generate a random short code, widening it on repeated collisions"""
        length = self.length
        while length <= self.max_length:
            for attempt in range(self.max_attempts):
                short_code = self._generate_random_string(length)
                if short_code in self.reserved:
                    continue
                if not self._exists(db_session, short_code):
                    return short_code
            
            logger.warning(
                "No free short code of length %d after %d attempts",
                length, self.max_attempts
            )
            length += 1
        
        raise ShortCodeExhausted(
            f"Could not generate unique short code up to length {self.max_length}"
        )
    
    def _exists(self, db_session: Session, short_code: str) -> bool:
        return db_session.query(Link.id).filter(
            Link.short_code == short_code
        ).first() is not None
    
    def _generate_random_string(self, length: int) -> str:
        """Generate a random string of the given length"""
        return ''.join(secrets.choice(self.alphabet) for _ in range(length))
