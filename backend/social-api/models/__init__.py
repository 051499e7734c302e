from db import Base  # 같은 Base 공유

# 등록용 임포트 (누락되면 create_all 에서 테이블이 빠집니다)
from .user import User
from .profile import Profile
from .post import Post, Comment, PostLike
from .support_ticket import SupportTicket, TicketStatus

__all__ = [
    "Base",
    "User", "Profile",
    "Post", "Comment", "PostLike",
    "SupportTicket", "TicketStatus",
]
