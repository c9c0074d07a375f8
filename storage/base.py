from abc import ABC, abstractmethod
from typing import Optional


class PointsStorage(ABC):
    """Base class for receipt points storage implementations."""
    
    @abstractmethod
    def put(self, points: int) -> str:
        """Store points under a newly generated receipt id and return the id."""
        pass
    
    @abstractmethod
    def get(self, receipt_id: str) -> Optional[int]:
        """Retrieve the points stored for a receipt id, or None if unknown."""
        pass
    
    @abstractmethod
    def __len__(self) -> int:
        """Number of stored records."""
        pass
    
    def __contains__(self, receipt_id: object) -> bool:
        return isinstance(receipt_id, str) and self.get(receipt_id) is not None
