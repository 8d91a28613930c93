"""Organisation domain models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Organisation:
    """Persisted organisation record."""
    id: UUID
    name: str
    email: str
    slug: str
    type: Optional[str]
    industry: Optional[str]
    state: Optional[str]
    country: Optional[str]
    address: Optional[str]
    created_at: datetime
    updated_at: datetime
