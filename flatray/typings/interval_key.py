from __future__ import annotations

from typing import Iterable, Protocol, TypeVar, runtime_checkable

EndpointT = TypeVar("EndpointT")
KeyT = TypeVar("KeyT", bound="IntervalKey")


@runtime_checkable
class IntervalKey(Protocol[EndpointT]):
    """What an interval tree needs from its keys.

    ``merge`` must be commutative and associative and absorb the empty key, so
    node extents can be folded bottom-up from their children. ``less_than`` is
    a strict total order; keys that are not ordered either way are ``equal_to``.
    ``val_less_than`` orders bare endpoints.
    """

    @property
    def low(self) -> EndpointT: ...

    @property
    def high(self) -> EndpointT: ...

    @property
    def max(self: KeyT) -> KeyT: ...

    def merge(self: KeyT, other: KeyT) -> KeyT: ...

    def less_than(self: KeyT, other: KeyT) -> bool: ...

    def equal_to(self: KeyT, other: KeyT) -> bool: ...

    def output(self: KeyT) -> KeyT: ...

    def maximal_val(self: KeyT, key1: KeyT, key2: KeyT) -> KeyT: ...

    def val_less_than(self, pt1: EndpointT, pt2: EndpointT) -> bool: ...


def join_keys(keys: Iterable[KeyT], initial: KeyT) -> KeyT:
    """Folds keys with their join, the way a tree node's extent is built from its children."""
    joined = initial
    for key in keys:
        joined = initial.maximal_val(joined, key)
    return joined
