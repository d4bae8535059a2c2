"""
User model for the logged-in baker.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class User:
    """Identity returned by the login endpoint."""

    user_id: int
    username: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=data.get("userId", 0),
            username=data.get("username") or "",
        )
