"""
Voter record, keyed by principal identifier.

Voter records are never cleared: registration and the has_voted flag carry
over from one election generation to the next.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Voter:
    """Registration and voting status of a single principal."""

    is_registered: bool = False
    has_voted: bool = False
    voted_candidate_id: Optional[int] = None  # None until a vote is cast
    registration_time: Optional[datetime] = None

    @classmethod
    def unregistered(cls) -> "Voter":
        """Zero-valued record returned for principals that never registered."""
        return cls()
