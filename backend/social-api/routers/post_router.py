from fastapi import APIRouter, BackgroundTasks
from typing import List

from dependencies import DB, CurrentUser, Hub
from common.errors import not_found
from schemas.post_schema import PostCreate, PostEdit, PostOut, PostDeleted, CommentCreate, CommentEdit, CommentOut
from services.post_service import PostService

router = APIRouter()
post_service = PostService()

# POST 생성
@router.post("/create", response_model=PostOut)
def create_post(payload: PostCreate, db: DB, user: CurrentUser, hub: Hub, background_tasks: BackgroundTasks):
    post = post_service.create_post(db, user.id, payload)
    background_tasks.add_task(
        hub.broadcast, "post:created", {"id": post.id, "handle": post.handle, "user_id": post.user_id}
    )
    return post

# POST 조회 By HANDLE
@router.get("/get/{handle}", response_model=PostOut)
def get_post(handle: str, db: DB):
    post = post_service.get_by_handle(db, handle)
    if not post:
        raise not_found(f"No post with the {handle} found.")
    return post

# POST 수정
@router.put("/edit/{post_id}", response_model=PostOut)
def edit_post(post_id: int, payload: PostEdit, db: DB, user: CurrentUser):
    return post_service.edit_post(db, post_id, user.id, payload)

# POST 삭제
@router.delete("/delete/{post_id}", response_model=PostDeleted)
def delete_post(post_id: int, db: DB, user: CurrentUser):
    return post_service.delete_post(db, post_id, user.id)

# 댓글 작성
@router.put("/comment/{handle}", response_model=PostOut)
def comment_post(handle: str, payload: CommentCreate, db: DB, user: CurrentUser, hub: Hub,
                 background_tasks: BackgroundTasks):
    post = post_service.add_comment(db, handle, user.id, payload)
    if post.user_id != user.id:
        background_tasks.add_task(
            hub.notify, post.user_id, "post:commented", {"handle": post.handle, "user_id": user.id}
        )
    return post

# 댓글 수정 (미구현: 현재 상태 반환)
@router.patch("/comment/edit/{post_handle}/{comment_id}", response_model=List[CommentOut])
def edit_comment(post_handle: str, comment_id: str, payload: CommentEdit, db: DB, user: CurrentUser):
    return post_service.edit_comment(db, post_handle, comment_id, payload)

# 댓글 삭제 (미구현: 현재 상태 반환)
@router.delete("/comment/delete/{post_handle}/{comment_id}", response_model=List[CommentOut])
def delete_comment(post_handle: str, comment_id: str, db: DB, user: CurrentUser):
    return post_service.delete_comment(db, post_handle, comment_id)

# 좋아요 / 좋아요 취소
@router.patch("/like/{handle}", response_model=PostOut)
def like_post(handle: str, db: DB, user: CurrentUser, hub: Hub, background_tasks: BackgroundTasks):
    post, liked = post_service.toggle_like(db, handle, user.id)
    if liked:
        background_tasks.add_task(
            hub.notify, post.user_id, "post:liked", {"handle": post.handle, "user_id": user.id}
        )
    return post
