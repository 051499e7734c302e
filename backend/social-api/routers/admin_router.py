from fastapi import APIRouter
from typing import List

from dependencies import DB, AdminUser
from models.user import User
from schemas.auth_schema import UserOut
from schemas.post_schema import PostDeleted
from schemas.support_schema import TicketOut
from services.post_service import PostService
from services.support_service import SupportService

router = APIRouter()
post_service = PostService()
support_service = SupportService()

# 전체 사용자
@router.get("/users", response_model=List[UserOut])
def get_users(db: DB, admin: AdminUser):
    return db.query(User).order_by(User.id.asc()).all()

# 전체 티켓
@router.get("/tickets", response_model=List[TicketOut])
def get_tickets(db: DB, admin: AdminUser):
    return support_service.get_tickets(db)

# 티켓 종료
@router.patch("/tickets/{ticket_id}/close", response_model=TicketOut)
def close_ticket(ticket_id: int, db: DB, admin: AdminUser):
    return support_service.close_ticket(db, ticket_id)

# POST 삭제 (소유자 무관)
@router.delete("/posts/{post_id}", response_model=PostDeleted)
def delete_post(post_id: int, db: DB, admin: AdminUser):
    return post_service.delete_post(db, post_id, owner_id=None)
