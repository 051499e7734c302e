from __future__ import annotations
import time
from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from common.errors import ApiException, not_found
from models.post import Post, PostLike
from models.profile import Profile
from schemas.post_schema import PostCreate, PostEdit, CommentCreate, CommentEdit
from utils import validators
from utils.comments import generate_comment
from utils.handles import generate_handle


class PostService:

    # handle 로 단일 조회
    def get_by_handle(self, db: Session, handle: str) -> Optional[Post]:
        return db.query(Post).filter(Post.handle == handle).order_by(Post.id.asc()).first()

    # 소유자 조건을 포함한 조회 (id + user_id)
    def get_owned(self, db: Session, post_id: int, user_id: int) -> Optional[Post]:
        return db.query(Post).filter(Post.id == post_id, Post.user_id == user_id).first()

    # POST 생성
    def create_post(self, db: Session, user_id: int, payload: PostCreate) -> Post:
        logger.info("[PostService] Method : create_post")
        errors = validators.post(payload.model_dump())
        if errors:
            raise ApiException(400, errors)

        post = Post(
            user_id=user_id,
            handle=generate_handle(payload.title),
            title=payload.title,
            body=payload.body,
        )
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    # POST 수정 (소유자 한정)
    def edit_post(self, db: Session, post_id: int, user_id: int, payload: PostEdit) -> Post:
        logger.info("[PostService] Method : edit_post")
        post = self.get_owned(db, post_id, user_id)
        if not post:
            raise not_found()

        post.handle = generate_handle(payload.title)
        post.title = payload.title
        post.body = payload.body
        db.commit()
        db.refresh(post)
        return post

    # POST 삭제 (소유자 한정, 관리자는 owner_id=None)
    def delete_post(self, db: Session, post_id: int, owner_id: Optional[int]) -> Dict[str, Any]:
        logger.info("[PostService] Method : delete_post")
        if owner_id is None:
            post = db.get(Post, post_id)
        else:
            post = self.get_owned(db, post_id, owner_id)
        if not post:
            raise not_found()

        db.delete(post)
        db.commit()
        return {"deleted": True, "timestamp": int(time.time() * 1000)}

    # 댓글 추가
    def add_comment(self, db: Session, handle: str, user_id: int, payload: CommentCreate) -> Post:
        logger.info("[PostService] Method : add_comment")
        post = self.get_by_handle(db, handle)
        if not post:
            raise not_found()

        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        comment = generate_comment(user_id, profile, payload.model_dump())
        if comment is None:
            raise ApiException(500, "An error occured.")

        post.comments.append(comment)
        db.commit()
        db.refresh(post)
        return post

    # 댓글 수정: 조회/검증만 하고 현재 상태 반환
    def edit_comment(self, db: Session, handle: str, comment_id: str, payload: CommentEdit) -> List:
        logger.info("[PostService] Method : edit_comment comment_id={}", comment_id)
        post = self.get_by_handle(db, handle)
        if not post:
            raise not_found()

        errors = validators.comment(payload.model_dump())
        if errors:
            raise ApiException(500, errors)
        # TODO: comment_id 기준 수정 (작성자 확인 포함) 구현
        return post.comments

    # 댓글 삭제: 조회만 하고 현재 상태 반환
    def delete_comment(self, db: Session, handle: str, comment_id: str) -> List:
        logger.info("[PostService] Method : delete_comment comment_id={}", comment_id)
        post = self.get_by_handle(db, handle)
        if not post:
            raise not_found()
        # TODO: comment_id 기준 삭제 (작성자/게시글 소유자 확인 포함) 구현
        return post.comments

    def find_like(self, db: Session, post_id: int, user_id: int) -> Optional[PostLike]:
        return db.query(PostLike).filter(PostLike.post_id == post_id, PostLike.user_id == user_id).first()

    # 좋아요 토글 -> (post, liked)
    def toggle_like(self, db: Session, handle: str, user_id: int):
        logger.info("[PostService] Method : toggle_like")
        post = self.get_by_handle(db, handle)
        if not post:
            raise not_found()
        if post.user_id == user_id:
            raise ApiException(403, {"error": "You cannot like your own post."})

        existing = self.find_like(db, post.id, user_id)
        if existing:
            db.delete(existing)
            db.commit()
            liked = False
        else:
            db.add(PostLike(post_id=post.id, user_id=user_id))
            try:
                db.commit()
                liked = True
            except IntegrityError:
                # 동시 요청이 먼저 좋아요를 넣은 경우
                db.rollback()
                logger.warning("[PostService] concurrent like post_id={} user_id={}", post.id, user_id)
                liked = True

        db.refresh(post)
        return post, liked
