from fastapi import APIRouter
from typing import List

from dependencies import DB, CurrentUser
from schemas.support_schema import TicketCreate, TicketOut
from services.support_service import SupportService

router = APIRouter()
support_service = SupportService()

# 티켓 생성
@router.post("/ticket", response_model=TicketOut)
def create_ticket(payload: TicketCreate, db: DB, user: CurrentUser):
    return support_service.create_ticket(db, user.id, payload)

# 내 티켓 목록
@router.get("/tickets", response_model=List[TicketOut])
def get_my_tickets(db: DB, user: CurrentUser):
    return support_service.get_tickets(db, user.id)
