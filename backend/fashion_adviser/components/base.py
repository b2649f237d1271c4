"""Narrow contract between a dialog engine and a custom component.

A component describes itself (name, input properties, outcome actions) and
executes against a context. The host owns registration and invocation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class PropertySpec:
    type: str = "string"
    required: bool = False


@dataclass(frozen=True)
class ComponentDescriptor:
    name: str
    properties: dict[str, PropertySpec] = field(default_factory=dict)
    supported_actions: tuple[str, ...] = ("success",)


class ComponentContext(Protocol):
    def get_property(self, name: str) -> Any: ...

    def get_variable(self, name: str) -> Any: ...

    def set_variable(self, name: str, value: Any) -> None: ...

    def transition(self, action: str) -> None: ...


class CustomComponent(ABC):
    @abstractmethod
    def describe(self) -> ComponentDescriptor:
        ...

    @abstractmethod
    async def execute(self, context: ComponentContext) -> None:
        """Run once per invocation and call context.transition() exactly once."""
