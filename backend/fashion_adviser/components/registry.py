"""In-process component host: registration, invocation and per-call context."""

import logging
from typing import Any

from fashion_adviser.components.base import ComponentDescriptor, CustomComponent
from fashion_adviser.exceptions import ComponentError

logger = logging.getLogger(__name__)


class InvocationContext:
    """Request-scoped context handed to a component.

    Holds the dialog properties and variables for one call and records the
    single outcome action the component picks.
    """

    def __init__(
        self,
        descriptor: ComponentDescriptor,
        properties: dict[str, Any] | None = None,
        variables: dict[str, Any] | None = None,
    ):
        self._descriptor = descriptor
        self._properties = dict(properties or {})
        self.variables: dict[str, Any] = dict(variables or {})
        self.action: str | None = None

    def get_property(self, name: str) -> Any:
        return self._properties.get(name)

    def get_variable(self, name: str) -> Any:
        return self.variables.get(name)

    def set_variable(self, name: str, value: Any) -> None:
        self.variables[name] = value

    def transition(self, action: str) -> None:
        if self.action is not None:
            raise ComponentError(
                f"{self._descriptor.name}: already transitioned to '{self.action}'"
            )
        if action not in self._descriptor.supported_actions:
            raise ComponentError(
                f"{self._descriptor.name}: undeclared action '{action}'"
            )
        self.action = action

    @property
    def transitioned(self) -> bool:
        return self.action is not None


class ComponentRegistry:
    """Named collection of components the dialog engine can invoke."""

    def __init__(self, closeables: list | None = None):
        self._components: dict[str, CustomComponent] = {}
        self._closeables = list(closeables or [])

    def register(self, component: CustomComponent) -> None:
        name = component.describe().name
        if name in self._components:
            raise ComponentError(f"Component '{name}' is already registered")
        self._components[name] = component
        logger.info(f"Registered component {name}")

    def get(self, name: str) -> CustomComponent | None:
        return self._components.get(name)

    def describe_all(self) -> list[ComponentDescriptor]:
        return [c.describe() for c in self._components.values()]

    async def invoke(
        self,
        name: str,
        properties: dict[str, Any] | None = None,
        variables: dict[str, Any] | None = None,
    ) -> InvocationContext:
        """Run a component once and return its context with the chosen action."""
        component = self.get(name)
        if component is None:
            raise ComponentError(f"Unknown component '{name}'")

        context = InvocationContext(component.describe(), properties, variables)
        await component.execute(context)
        if not context.transitioned:
            raise ComponentError(f"{name}: finished without a transition")
        return context

    async def aclose(self) -> None:
        for closeable in self._closeables:
            await closeable.close()
