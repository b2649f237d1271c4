"""Components router: metadata and invocation endpoints for the dialog engine."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from fashion_adviser.components.base import ComponentDescriptor
from fashion_adviser.components.registry import ComponentRegistry
from fashion_adviser.dependencies import get_registry
from fashion_adviser.schemas.components import (
    ComponentListResponse,
    ComponentMetadata,
    InvokeRequest,
    InvokeResponse,
    PropertyMetadata,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_metadata(descriptor: ComponentDescriptor) -> ComponentMetadata:
    return ComponentMetadata(
        name=descriptor.name,
        properties={
            name: PropertyMetadata(type=spec.type, required=spec.required)
            for name, spec in descriptor.properties.items()
        },
        supported_actions=list(descriptor.supported_actions),
    )


@router.get("", response_model=ComponentListResponse)
async def list_components(registry: ComponentRegistry = Depends(get_registry)):
    """Metadata for every registered component."""
    return ComponentListResponse(
        components=[_to_metadata(d) for d in registry.describe_all()]
    )


@router.post("/{name}", response_model=InvokeResponse)
async def invoke_component(
    name: str,
    body: InvokeRequest,
    registry: ComponentRegistry = Depends(get_registry),
):
    if registry.get(name) is None:
        raise HTTPException(status_code=404, detail=f"Component '{name}' not found")

    context = await registry.invoke(name, body.properties, body.variables)
    logger.info(f"Component {name} -> {context.action}")
    return InvokeResponse(action=context.action, variables=context.variables)
