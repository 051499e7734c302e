from __future__ import annotations
from typing import List, Optional

from loguru import logger
from sqlalchemy.orm import Session

from common.errors import ApiException, not_found
from models.support_ticket import SupportTicket, TicketStatus
from schemas.support_schema import TicketCreate
from utils import validators


class SupportService:

    # 티켓 생성
    def create_ticket(self, db: Session, user_id: int, payload: TicketCreate) -> SupportTicket:
        logger.info("[SupportService] Method : create_ticket")
        errors = validators.ticket(payload.model_dump())
        if errors:
            raise ApiException(400, errors)

        ticket = SupportTicket(
            user_id=user_id,
            subject=payload.subject.strip(),
            message=payload.message.strip(),
        )
        db.add(ticket)
        db.commit()
        db.refresh(ticket)
        return ticket

    # 티켓 조회 (user_id 가 없으면 전체)
    def get_tickets(self, db: Session, user_id: Optional[int] = None) -> List[SupportTicket]:
        logger.info("[SupportService] Method : get_tickets")
        query = db.query(SupportTicket)
        if user_id is not None:
            query = query.filter(SupportTicket.user_id == user_id)
        return query.order_by(SupportTicket.id.desc()).all()

    # 티켓 종료
    def close_ticket(self, db: Session, ticket_id: int) -> SupportTicket:
        logger.info("[SupportService] Method : close_ticket")
        ticket = db.get(SupportTicket, ticket_id)
        if not ticket:
            raise not_found("Ticket not found.")
        ticket.status = TicketStatus.closed
        db.commit()
        db.refresh(ticket)
        return ticket
