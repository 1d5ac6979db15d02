from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class PropertyBundle:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str  # sha256 hex length = 64
    character_frequency_map: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class StringRecord:
    value: str
    properties: PropertyBundle
    created_at: datetime

    @property
    def id(self) -> str:
        return self.properties.sha256_hash

    def __str__(self):
        return f"{self.value} - {self.id[:50]}"


@dataclass
class FilterSet:
    """Optional predicates used to select records.

    A field left as ``None`` imposes no constraint.
    """

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def as_dict(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.as_dict()
