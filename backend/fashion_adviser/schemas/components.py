from typing import Any

from pydantic import BaseModel


class PropertyMetadata(BaseModel):
    type: str
    required: bool


class ComponentMetadata(BaseModel):
    name: str
    properties: dict[str, PropertyMetadata]
    supported_actions: list[str]


class ComponentListResponse(BaseModel):
    components: list[ComponentMetadata]


class InvokeRequest(BaseModel):
    properties: dict[str, Any] = {}
    variables: dict[str, Any] = {}


class InvokeResponse(BaseModel):
    action: str
    variables: dict[str, Any]
