from pydantic import BaseModel, ConfigDict
from typing import Optional, Any


class CommitCreate(BaseModel):
    """Схема для создания коммита"""
    message: str
    timestamp: Optional[float] = None
    snapshot: Any = None


class CommitResponse(BaseModel):
    """Схема для ответа с данными коммита"""
    id: str
    message: str
    timestamp: float
    snapshot: Any = None

    model_config = ConfigDict(from_attributes=True)
