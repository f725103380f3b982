from pydantic import BaseModel, Field


class HomeCounts(BaseModel):
    book_count: int = Field(..., ge=0)
    book_instance_count: int = Field(..., ge=0)
    book_instance_available_count: int = Field(..., ge=0)
    author_count: int = Field(..., ge=0)
    genre_count: int = Field(..., ge=0)
