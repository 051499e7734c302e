from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from models.support_ticket import TicketStatus

class TicketCreate(BaseModel):
    subject: Optional[str] = None
    message: Optional[str] = None

class TicketOut(BaseModel):
    id: int
    user_id: int
    subject: str
    message: str
    status: TicketStatus
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
