from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from semantium.units.registry import BaseUnitRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "BaseUnitRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from semantium.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'b' builds a namespace over the
    package's default base unit registry on first use.
    """
    if name == "b":
        return _get_default_registry().as_namespace()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["b"])
