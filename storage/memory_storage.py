import logging
import uuid
from typing import Callable, Dict, Optional

from services.errors import IdentifierSpaceExhaustedError
from storage.base import PointsStorage
from storage.locks import ReadWriteLock

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


def generate_receipt_id() -> str:
    """Generate a random 128-bit receipt id in canonical UUID string form."""
    return str(uuid.uuid4())


class InMemoryPointsStorage(PointsStorage):
    """Storage implementation keeping receipt points in process memory.
    
    Records are never updated or deleted once written.
    """
    
    def __init__(self,
                 max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                 id_factory: Callable[[], str] = generate_receipt_id):
        """
        Initialize the storage.
        
        Args:
            max_attempts: Number of ids to try before giving up on a collision
            id_factory: Callable returning a fresh candidate receipt id
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self._id_factory = id_factory
        self._points: Dict[str, int] = {}
        self._lock = ReadWriteLock()
    
    def put(self, points: int) -> str:
        """
        Store points under a new receipt id.
        
        Args:
            points: Points awarded to the receipt
            
        Returns:
            The newly assigned receipt id
            
        Raises:
            IdentifierSpaceExhaustedError: If every generated id was already taken
        """
        for attempt in range(1, self.max_attempts + 1):
            # Generated outside the lock; only check-and-insert is guarded
            receipt_id = self._id_factory()
            with self._lock.write_locked():
                if receipt_id not in self._points:
                    self._points[receipt_id] = points
                    return receipt_id
            logger.warning(f"Receipt id collision on attempt {attempt}/{self.max_attempts}")
        
        raise IdentifierSpaceExhaustedError(self.max_attempts)
    
    def get(self, receipt_id: str) -> Optional[int]:
        """Retrieve the points for a receipt id, or None if it was never issued."""
        if not isinstance(receipt_id, str):
            return None
        with self._lock.read_locked():
            return self._points.get(receipt_id)
    
    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._points)
