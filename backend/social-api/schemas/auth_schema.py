from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    password2: Optional[str] = None

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class LoginResponse(BaseModel):
    success: bool
    token: str

class UserOut(BaseModel):
    id: int
    email: str
    is_admin: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
