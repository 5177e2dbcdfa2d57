from typing import Any, Dict, Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T')


class MochiModel(BaseModel):
    # Mochi uses dash-separated keys; unknown keys are ignored
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Deck(MochiModel):
    id: str
    name: str
    parent_id: Optional[str] = Field(None, alias="parent-id")
    template_id: Optional[str] = Field(None, alias="template-id")


class TemplateField(MochiModel):
    id: str
    name: str
    pos: str
    options: Optional[Dict[str, Any]] = None


class Template(MochiModel):
    id: str
    name: str
    content: str
    fields: Optional[Dict[str, TemplateField]] = None


class CardField(MochiModel):
    id: str
    value: str = ""


class Card(MochiModel):
    id: str
    content: str = ""
    deck_id: str = Field(..., alias="deck-id")
    tags: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)
    template_id: Optional[str] = Field(None, alias="template-id")
    fields: Optional[Dict[str, CardField]] = None

    def field_value(self, field_id: str) -> Optional[str]:
        if not self.fields or field_id not in self.fields:
            return None
        return self.fields[field_id].value


class PaginatedResponse(BaseModel, Generic[T]):
    bookmark: Optional[str] = None
    docs: List[T] = Field(default_factory=list)
