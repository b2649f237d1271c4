from fashion_adviser.components import create_registry
from fashion_adviser.components.registry import ComponentRegistry
from fashion_adviser.config import get_settings

_registry: ComponentRegistry | None = None


def get_registry() -> ComponentRegistry:
    """Process-wide component registry, built on first use."""
    global _registry
    if _registry is None:
        _registry = create_registry(get_settings())
    return _registry


async def close_registry() -> None:
    global _registry
    if _registry is not None:
        await _registry.aclose()
        _registry = None
