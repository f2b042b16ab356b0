"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from core.application.dtos.location_dto import PlaceDetails


class IPlaceLookup(ABC):
    """
    Interface for resolving place IDs.
    
    Locations are never entered by hand: address and coordinates
    come from this lookup.
    """
    
    @abstractmethod
    async def get_place_details(self, place_id: str) -> PlaceDetails:
        """
        Resolve a place ID.
        
        Args:
            place_id: External place identifier
        
        Returns:
            Address and coordinates of the place
        
        Raises:
            PlaceNotFoundError: If the place ID matches nothing
            PlaceLookupError: If the lookup service cannot be reached
        """
        pass


class IPasswordHasher(ABC):
    """Interface for one-way password hashing."""
    
    @abstractmethod
    def hash(self, password: str) -> str:
        pass
    
    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        pass


class ITokenService(ABC):
    """Interface for issuing and verifying access tokens."""
    
    @abstractmethod
    def issue(self, claims: Dict[str, Any], token_type: str = "auth") -> str:
        """
        Sign a token.
        
        Args:
            claims: Payload claims
            token_type: "auth" tokens are short-lived, others last longer
        
        Returns:
            Encoded token
        """
        pass
    
    @abstractmethod
    def verify(self, token: str) -> Dict[str, Any]:
        """
        Decode and check a token.
        
        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        pass
