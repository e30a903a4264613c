from pydantic import BaseModel
from uuid import UUID
from datetime import datetime
from typing import Optional

class UserOut(BaseModel):
    id: UUID
    username: str
    email: str
    is_active: bool
    created_at: Optional[datetime] = None
    class Config:
        from_attributes = True
