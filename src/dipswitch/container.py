"""
A small dependency injection container with pytest-fixture-like semantics.

Definitions are marked explicitly; bare callables are never injected:

- @resource: the base value of a name. Parameters name its dependencies.
- @patch: returns an endofunction applied to the base value, in mount order.
- @extern: declares a name another component (or a keyword override) provides.

Classes and modules are union-mounted with :func:`resolve_root`::

    from dipswitch.wiring import console, lighting, power

    root = resolve_root(console, lighting, power)
    root.power_switch.operate(True)  # prints "LightBulb: Bulb turned on..."

    # Keyword arguments provide values, e.g. to satisfy an @extern:
    root = resolve_root(lighting, power)(output=io.StringIO())
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from inspect import signature
from typing import (
    Any,
    Callable,
    Final,
    Iterator,
    Mapping,
    Self,
    TypeVar,
    final,
)

from typing_extensions import override

_logger: Final[logging.Logger] = logging.getLogger(__name__)

T = TypeVar("T")

Endo = Callable[[T], T]


class Definition(ABC):
    """Something a component says about one name."""

    __slots__ = ()


class Provider(Definition):
    """A definition that produces the base value of a name."""

    __slots__ = ()

    @abstractmethod
    def provide(self, container: "Container") -> object: ...


@final
@dataclass(frozen=True, kw_only=True, slots=True)
class ResourceDefinition(Provider):
    function: Callable[..., Any]

    @override
    def provide(self, container: "Container") -> object:
        return container.call(self.function)


@final
@dataclass(frozen=True, kw_only=True, slots=True)
class ValueDefinition(Provider):
    """A value passed as a keyword argument to :meth:`Container.__call__`."""

    value: object

    @override
    def provide(self, container: "Container") -> object:
        return self.value


@final
@dataclass(frozen=True, kw_only=True, slots=True)
class PatchDefinition(Definition):
    function: Callable[..., Endo[Any]]

    def apply(self, container: "Container", value: object) -> object:
        return container.call(self.function)(value)


@final
@dataclass(frozen=True, kw_only=True, slots=True)
class ExternDefinition(Definition):
    """Documents a name and its expected type; contributes nothing."""

    function: Callable[..., Any]


def resource(function: Callable[..., T]) -> ResourceDefinition:
    """
    Mark ``function`` as the provider of the resource named after it.

        @resource
        def switchable(output: TextIO) -> Switchable:
            return LightBulb(output=output)
    """
    return ResourceDefinition(function=function)


def patch(function: Callable[..., Endo[T]]) -> PatchDefinition:
    """
    Mark ``function`` as a modification of the resource named after it.

        @patch
        def switchable() -> Endo[Switchable]:
            return lambda inner: LoggingSwitchable(inner=inner)
    """
    return PatchDefinition(function=function)


def extern(function: Callable[..., T]) -> ExternDefinition:
    """
    Declare a resource that another component provides.

        @extern
        def output() -> TextIO: ...
    """
    return ExternDefinition(function=function)


@final
@dataclass(frozen=True, kw_only=True, slots=True)
class Component:
    """The definitions found on one class or module."""

    definitions: Mapping[str, Definition]

    @classmethod
    def parse(cls, namespace: object) -> Self:
        return cls(
            definitions={
                name: value
                for name in dir(namespace)
                if isinstance(value := getattr(namespace, name), Definition)
            }
        )

    @classmethod
    def of_values(cls, **values: object) -> Self:
        return cls(
            definitions={
                name: ValueDefinition(value=value) for name, value in values.items()
            }
        )


@final
@dataclass(frozen=True, kw_only=True, slots=True)
class Container(Mapping[str, object]):
    """
    Union mount of components. Each resource is evaluated at most once.

    Missing names raise ``KeyError`` (``AttributeError`` for attribute access).
    A name with patches or @extern declarations but no provider raises
    ``NotImplementedError``; a name with two providers raises ``ValueError``.
    """

    components: tuple[Component, ...]
    _cache: dict[str, object] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _resolving: set[str] = field(
        default_factory=set, init=False, repr=False, compare=False
    )

    def _definitions(self, key: str) -> list[Definition]:
        return [
            component.definitions[key]
            for component in self.components
            if key in component.definitions
        ]

    def _evaluate(self, key: str) -> object:
        definitions = self._definitions(key)
        if not definitions:
            raise KeyError(key)
        providers = [
            definition for definition in definitions if isinstance(definition, Provider)
        ]
        if not providers:
            raise NotImplementedError(f"No definition provided for {key!r}")
        if len(providers) > 1:
            raise ValueError(f"Multiple definitions provided for {key!r}")
        if key in self._resolving:
            raise RecursionError(f"Circular dependency on {key!r}")

        _logger.debug("Resolving %r", key)
        self._resolving.add(key)
        try:
            value = providers[0].provide(self)
            for definition in definitions:
                if isinstance(definition, PatchDefinition):
                    value = definition.apply(self, value)
        finally:
            self._resolving.discard(key)
        return value

    def call(self, function: Callable[..., T]) -> T:
        """Call ``function`` with each parameter resolved by name."""
        return function(
            **{name: self[name] for name in signature(function).parameters}
        )

    @override
    def __getitem__(self, key: str) -> object:
        if key not in self._cache:
            self._cache[key] = self._evaluate(key)
        return self._cache[key]

    def __getattr__(self, key: str) -> Any:
        # A KeyError raised by a dependency must not read as this name missing.
        if key not in self:
            raise AttributeError(name=key, obj=self)
        return self[key]

    @override
    def __contains__(self, key: object) -> bool:
        return any(key in component.definitions for component in self.components)

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(
            dict.fromkeys(
                name for component in self.components for name in component.definitions
            )
        )

    @override
    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __call__(self, **values: object) -> "Container":
        """Return a new container where each keyword argument provides a resource."""
        return Container(components=(*self.components, Component.of_values(**values)))


def resolve_root(*namespaces: object) -> Container:
    """
    Union-mount the definitions of classes and modules into one container.

    Patches are applied in the order their namespaces are given.
    """
    return Container(
        components=tuple(Component.parse(namespace) for namespace in namespaces)
    )
