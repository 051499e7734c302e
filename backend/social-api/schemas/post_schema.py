from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Any, List, Optional

# create 는 필드 규칙 검증을 직접 하므로 모두 Optional
class PostCreate(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None

class PostEdit(BaseModel):
    title: str
    body: str

class CommentCreate(BaseModel):
    text: Optional[str] = None

class CommentEdit(CommentCreate):
    pass

class CommentOut(BaseModel):
    id: int
    user_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_picture: Optional[str] = None
    text: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

class PostOut(BaseModel):
    id: int
    user_id: int
    handle: str
    title: str
    body: str
    comments: List[CommentOut] = []
    likes: List[int] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("likes", mode="before")
    @classmethod
    def _like_user_ids(cls, value: Any) -> List[int]:
        return [getattr(v, "user_id", v) for v in value or []]

class PostDeleted(BaseModel):
    deleted: bool
    timestamp: int
