from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any


class Project(BaseModel):
    """Сохраняемое представление проекта: разметка и настройки"""
    name: str
    description: Optional[str] = None
    layout: List[Dict[str, Any]] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)


class ProjectMetadata(BaseModel):
    """Краткие сведения о проекте для списка"""
    id: str
    name: str = "Untitled"
    last_modified: float = 0.0
    component_count: int = 0

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "ProjectMetadata":
        """Извлечение метаданных из сохранённого JSON-документа"""
        name = document.get("name")
        last_modified = document.get("last_modified")
        layout = document.get("layout")

        return cls(
            id=str(document.get("id") or ""),
            name=name if isinstance(name, str) else "Untitled",
            last_modified=_as_float(last_modified),
            component_count=len(layout) if isinstance(layout, list) else 0
        )


class ProjectSaveRequest(BaseModel):
    """Схема запроса на сохранение: произвольный JSON-объект проекта"""
    id: Optional[str] = None

    model_config = {"extra": "allow"}

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return v.strip() if v else None


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)
