from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class Template(BaseModel):
    """Шаблон набора компонентов"""
    id: str = ""
    name: str
    description: str = ""
    category: str = ""
    thumbnail: Optional[str] = None
    components: List[Dict[str, Any]] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    last_modified: Optional[float] = None
