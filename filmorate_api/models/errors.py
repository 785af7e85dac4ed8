from __future__ import annotations
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: Optional[str] = None
    errorMessages: Optional[List[str]] = None
