"""User entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Registered user. `password` always holds a hash, never plaintext."""
    name: str
    email: str
    password: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.email = self.email.strip().lower()
