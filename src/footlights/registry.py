"""
Builder registry.

The structure resolver keeps one builder per
:py:class:`~footlights.config.structure.LayerKind`. ``new_registry`` returns
the mapping together with a ``@register(key)`` decorator that fills it::

    BUILDERS, register = new_registry(attribute="kind")

    @register(LayerKind.BACKGROUND)
    def build_background(slot, style, provider):
        ...

    layer = BUILDERS[slot.kind](slot, style, provider)
"""

from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

T = TypeVar("T")


def new_registry(
    attribute: Optional[str] = None,
) -> Tuple[Dict[Any, Callable], Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: if given, the key is also stored under this attribute
        name on each registered function.
    :raise KeyError: when a key is registered twice.
    """
    registry: Dict[Any, Callable] = {}

    def register(key: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            if key in registry:
                raise KeyError("Builder already registered for %r" % (key,))
            registry[key] = func
            if attribute:
                setattr(func, attribute, key)
            return func

        return decorator

    return registry, register
