from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")


class RemoteModel(BaseModel):
    """Base for payloads the Krea API sends in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class Page(RemoteModel, Generic[ItemT]):
    items: List[ItemT] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False
    next_cursor: Optional[str] = None
