"""Feature flags – Present/Absent gating of renderable units.

A gated unit is resolved once, at composition time, to either
:class:`Present` (wrapping the unit unchanged) or :class:`Absent`.
Rendering ``Present`` delegates every input to the unit; rendering
``Absent`` contributes nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, Iterator, TypeAlias, TypeVar, Union

from mp_analytics.feature_flags.feature_flag import FeatureName
from mp_analytics.feature_flags.snapshot import is_enabled

C = TypeVar("C", bound=Callable[..., Any])


class Present(Generic[C]):
    """A unit that takes part in composition."""

    __slots__ = ("_unit",)

    def __init__(self, unit: C) -> None:
        self._unit = unit

    @property
    def unit(self) -> C:
        return self._unit

    def is_present(self) -> bool:
        return True

    def render(self, *args: Any, **kwargs: Any) -> Any:
        return self._unit(*args, **kwargs)

    __call__ = render

    def __iter__(self) -> Iterator[C]:
        yield self._unit

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Present) and other._unit is self._unit

    def __hash__(self) -> int:
        return hash(("Present", id(self._unit)))

    def __repr__(self) -> str:
        return f"Present({self._unit!r})"


class Absent:
    """A gated-off unit: renders to ``None`` whatever it is given."""

    __slots__ = ()

    def is_present(self) -> bool:
        return False

    def render(self, *args: Any, **kwargs: Any) -> None:  # noqa: ARG002
        return None

    __call__ = render

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash("Absent")

    def __repr__(self) -> str:
        return "Absent"


Gated: TypeAlias = Union[Present[C], Absent]


def gate(component: C, name: FeatureName | str, snapshot: Mapping[FeatureName, bool]) -> Gated[C]:
    """Wrap *component* so it only takes part in composition when *name* is enabled."""
    if is_enabled(snapshot, name):
        return Present(component)
    return Absent()


def compose(*units: Gated[Any], **props: Any) -> list[Any]:
    """Render every present unit with the same *props*, skipping absent ones."""
    return [unit.render(**props) for unit in units if unit.is_present()]


__all__ = ["Absent", "Gated", "Present", "compose", "gate"]
