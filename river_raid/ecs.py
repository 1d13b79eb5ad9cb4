"""
Entity Store
=============
Integer entity IDs with one component dictionary per component type.

Destruction is deferred: a destroyed entity is invisible to queries for
the rest of the tick and purged by process_dead_entities().
"""

from typing import Dict, Set, Type, TypeVar, Optional, Iterator, Tuple, Any
import itertools


C = TypeVar('C')


class EntityStore:
    """
    Holds the transient entities of one session (enemies and bullets).

    Component dicts keep insertion order, so queries always visit
    entities in creation order.
    """

    def __init__(self):
        self._ids = itertools.count()
        self._entities: Dict[int, None] = {}
        self._components: Dict[Type, Dict[int, Any]] = {}
        self._dead_entities: Set[int] = set()

    def create_entity(self) -> int:
        """Create a new entity and return its ID."""
        entity_id = next(self._ids)
        self._entities[entity_id] = None
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Mark an entity for destruction (purged at end of tick)."""
        if entity_id in self._entities:
            self._dead_entities.add(entity_id)

    def process_dead_entities(self) -> None:
        """Remove all entities marked for destruction."""
        for entity_id in self._dead_entities:
            del self._entities[entity_id]
            for component_store in self._components.values():
                component_store.pop(entity_id, None)
        self._dead_entities.clear()

    def add_component(self, entity_id: int, component: Any) -> None:
        """Attach a component, replacing any of the same type."""
        self._components.setdefault(type(component), {})[entity_id] = component

    def get_component(self, entity_id: int, component_type: Type[C]) -> Optional[C]:
        """Get a component for an entity, or None if not found."""
        return self._components.get(component_type, {}).get(entity_id)

    def has_component(self, entity_id: int, component_type: Type) -> bool:
        return entity_id in self._components.get(component_type, {})

    def query(self, *component_types: Type) -> Iterator[Tuple[Any, ...]]:
        """
        Query for all live entities that have ALL specified component types.

        Yields tuples of (entity_id, component1, component2, ...)
        """
        if not component_types:
            return

        stores = [self._components.get(ct) for ct in component_types]
        if any(store is None for store in stores):
            return

        # Snapshot the ids so systems may create entities while iterating
        for entity_id in list(stores[0]):
            if entity_id in self._dead_entities:
                continue
            if not all(entity_id in store for store in stores[1:]):
                continue
            yield (entity_id,) + tuple(store[entity_id] for store in stores)

    def entity_count(self) -> int:
        """Return the number of live entities."""
        return len(self._entities) - len(self._dead_entities)

    def is_alive(self, entity_id: int) -> bool:
        """Check if an entity exists and is not marked for death."""
        return entity_id in self._entities and entity_id not in self._dead_entities
