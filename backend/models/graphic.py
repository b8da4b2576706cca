"""Generation models shared by the services and the HTTP layer"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class TemplateKind(str, Enum):
    """The four visual compositions the generator can produce"""
    NETWORK = "network"
    TIMELINE = "timeline"
    FUNNEL = "funnel"
    ABSTRACT = "abstract"


class TargetFormat(str, Enum):
    SVG = "svg"
    PNG = "png"


class _WireModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class GenerationRequest(_WireModel):
    prompt: str
    color: str
    session_id: Optional[str] = Field(default=None, alias="sessionId")


class GenerationPayload(_WireModel):
    """
    Style intent derived from prompt + color.
    Descriptive only: the template renderers never read it.
    """
    prompt: str
    color: str
    style_directives: List[str] = Field(alias="styleDirectives")
    mood: str
    target_format: TargetFormat = Field(default=TargetFormat.SVG, alias="targetFormat")


class GeneratedGraphic(_WireModel):
    """A finished graphic. Immutable once produced."""
    svg: str
    title: str
    tags: List[str]
    style_description: str = Field(alias="styleDescription")
    color: str
    prompt: str
    created_at: int = Field(alias="createdAt")  # ms since epoch
    template: TemplateKind


class GenerateResponse(_WireModel):
    graphic: GeneratedGraphic
    payload: GenerationPayload
