from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    ID はストアが採番するため、永続化前は None を取り得る。
    ID 未採番のエンティティ同士はオブジェクト同一性で比較する。
    """

    def __init__(self, id: ID | None) -> None:
        self._id = id

    @property
    def id(self) -> ID | None:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        if self._id is None or other._id is None:
            return self is other
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)
