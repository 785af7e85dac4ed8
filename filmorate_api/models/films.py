from __future__ import annotations
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Film(BaseModel):
    """Фильм каталога. Поля проверяются в сервисном слое, а не здесь."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = Field(default=None, alias="releaseDate")
    duration: Optional[int] = Field(default=None, description="minutes")
