from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Base repository

    - hides how aggregates are stored
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """Store the aggregate"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """Look up an aggregate by its id"""
        raise NotImplementedError
