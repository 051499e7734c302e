from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from loguru import logger
from sqlalchemy.orm import Session

from models.post import Post, Comment, PostLike
from utils.handles import generate_handle
from utils.serialized import load_list


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _convert_comment(raw: Any) -> Optional[Comment]:
    if not isinstance(raw, Mapping):
        return None
    author = raw.get("user_id")
    if author is None:
        author = raw.get("user")
    user_id = _as_int(author)
    text = raw.get("text")
    if user_id is None or not isinstance(text, str) or not text.strip():
        return None
    return Comment(
        user_id=user_id,
        first_name=raw.get("first_name") or raw.get("firstName"),
        last_name=raw.get("last_name") or raw.get("lastName"),
        profile_picture=raw.get("profile_picture") or raw.get("profilePicture"),
        text=text.strip(),
    )


def _liker_ids(raw: Any, owner_id: int) -> List[int]:
    # 중복 제거 + 작성자 본인 제외, 순서 유지
    seen: List[int] = []
    for value in load_list(raw):
        user_id = _as_int(value)
        if user_id is None or user_id == owner_id or user_id in seen:
            continue
        seen.append(user_id)
    return seen


def import_rows(db: Session, rows: Iterable[Mapping[str, Any]]) -> Tuple[int, int]:
    """
    직렬화 컬럼(comments/likes 텍스트) 형태의 구 posts 행을 현재 스키마로 이관.
    return: (imported, skipped)
    """
    imported, skipped = 0, 0
    for row in rows:
        owner_id = _as_int(row.get("user_id"))
        title = row.get("title")
        if owner_id is None or not isinstance(title, str) or not title:
            logger.warning("[legacy_import] skip row without user_id/title: {}", row.get("id"))
            skipped += 1
            continue

        post = Post(
            user_id=owner_id,
            handle=row.get("handle") or generate_handle(title),
            title=title,
            body=row.get("body") or "",
        )
        for raw_comment in load_list(row.get("comments")):
            comment = _convert_comment(raw_comment)
            if comment is not None:
                post.comments.append(comment)
        for user_id in _liker_ids(row.get("likes"), owner_id):
            post.likes.append(PostLike(user_id=user_id))

        db.add(post)
        imported += 1

    db.commit()
    logger.info("[legacy_import] imported={} skipped={}", imported, skipped)
    return imported, skipped


def import_file(db: Session, path: Path) -> Tuple[int, int]:
    rows = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(rows, list):
        raise ValueError(f"{path}: expected a JSON list of post rows")
    return import_rows(db, rows)
