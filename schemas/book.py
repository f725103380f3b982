from typing import List
from pydantic import BaseModel, Field


class CopyRead(BaseModel):
    imprint: str
    status: str


class BookListItem(BaseModel):
    title: str
    author: str


class BookDetailRead(BookListItem):
    copies: List[CopyRead] = Field(default_factory=list)
