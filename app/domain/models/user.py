from dataclasses import dataclass, field
from typing import List, Optional


def normalize_city_name(city: str) -> str:
    """Comparison key for city names: trimmed and lowercased"""
    return (city or "").strip().lower()


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    password_hash: str
    favorites: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")

    def has_favorite(self, city: str) -> bool:
        """Check whether a city is already a favorite (trim + case-insensitive)"""
        candidate = normalize_city_name(city)
        return any(normalize_city_name(existing) == candidate for existing in self.favorites)
