from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Mapping[str, int]

    def __post_init__(self):
        # freeze the map so a stored record can't be edited through it
        object.__setattr__(
            self, "character_frequency_map",
            MappingProxyType(dict(self.character_frequency_map)),
        )

    def as_dict(self):
        return {
            "length": self.length,
            "is_palindrome": self.is_palindrome,
            "unique_characters": self.unique_characters,
            "word_count": self.word_count,
            "sha256_hash": self.sha256_hash,
            "character_frequency_map": dict(self.character_frequency_map),
        }


@dataclass(frozen=True)
class StringRecord:
    value: str
    properties: StringProperties
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def id(self) -> str:
        return self.properties.sha256_hash

    def __str__(self):
        return f"{self.value} - {self.id[:50]}"
