from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """Currency code (ISO 4217), e.g. USD, EUR"""

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 3 or not self.code.isalpha():
            raise ValueError(f"Invalid currency code: {self.code}")
        # frozen=True still needs object.__setattr__ inside __post_init__
        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code

    @classmethod
    def usd(cls) -> Currency:
        """US dollar"""
        return cls("USD")
