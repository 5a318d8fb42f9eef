from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - ID の採番はストア側の責務
    """

    @abstractmethod
    def create(self, entity: T) -> T:
        """エンティティを新規保存し、採番済みの ID を持つエンティティを返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDでエンティティを検索する"""
        raise NotImplementedError
