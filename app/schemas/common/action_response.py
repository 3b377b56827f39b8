from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ActionResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None


class CreatedId(BaseModel):
    id: str


class ItemsResponse(BaseModel, Generic[T]):
    items: List[T]
    total: int
