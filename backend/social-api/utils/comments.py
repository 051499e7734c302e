from __future__ import annotations
from typing import Any, Mapping, Optional

from models.post import Comment
from models.profile import Profile


def generate_comment(user_id: int, profile: Optional[Profile], data: Mapping[str, Any]) -> Optional[Comment]:
    # 본문이 비어 있으면 댓글을 만들지 않음
    text = data.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    return Comment(
        user_id=user_id,
        first_name=profile.first_name if profile else None,
        last_name=profile.last_name if profile else None,
        profile_picture=profile.profile_picture if profile else None,
        text=text.strip(),
    )
