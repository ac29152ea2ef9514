"""
Relationship availability overlay.
"""

from typing import FrozenSet, Iterable, Set

from flowharness.component.capabilities import is_routing_component
from flowharness.component.descriptor import Relationship


class RelationshipOverlay:
    """
    Which declared relationships a routing component may currently use.

    The unavailable set is only ever replaced as a whole with a frozenset.
    The swap alone gives a reader on another thread either the old or the new
    set, never a partial one.
    """

    def __init__(self, component):
        self.component = component
        self._unavailable: FrozenSet[Relationship] = frozenset()

    @property
    def unavailable(self) -> FrozenSet[Relationship]:
        return self._unavailable

    def mark_unavailable(self, relationships: Iterable[Relationship]):
        # Relationships the component does not declare are accepted as-is
        self._unavailable = frozenset(relationships)

    def available(self) -> Set[Relationship]:
        if not is_routing_component(self.component):
            return set()
        unavailable = self._unavailable
        return set(self.component.get_relationships() or ()) - unavailable
