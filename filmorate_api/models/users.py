from __future__ import annotations
from datetime import date
from typing import Optional, Set
from pydantic import BaseModel, Field


class User(BaseModel):
    id: Optional[int] = None
    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None
    # ids друзей: внутреннее состояние, наружу не сериализуется
    friends: Set[int] = Field(default_factory=set, exclude=True)
