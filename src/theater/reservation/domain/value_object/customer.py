from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Theater customer, equal when both name and id match"""

    name: str
    id: str

    def __str__(self) -> str:
        return f"Customer {{id={self.id}, name='{self.name}'}}"
