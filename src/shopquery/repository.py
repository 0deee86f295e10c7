import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic repository over a single in-memory entity list.
    Encapsulates lookups, filtering and mutation for one collection.

    The list is held by reference: every repository built over the same
    list sees the same rows. Identifiers are read through ``id_selector``
    and are not required to be unique; lookups return the first match.
    """

    def __init__(self, entities: List[T], id_selector: Callable[[T], int]):
        self._entities = entities
        self._id_selector = id_selector

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get the first entity whose identifier matches, or None."""
        for entity in self._entities:
            if self._id_selector(entity) == entity_id:
                return entity
        return None

    def get_all(self) -> List[T]:
        """Return a snapshot copy of the collection."""
        return list(self._entities)

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return every entity matching the predicate, in list order."""
        return [entity for entity in self._entities if predicate(entity)]

    def add(self, entity: T) -> None:
        """Append an entity. No uniqueness check is performed."""
        self._entities.append(entity)
        logger.debug("Added %r", entity)

    def add_range(self, entities: Iterable[T]) -> None:
        """Append every entity, preserving input order."""
        for entity in list(entities):
            self.add(entity)

    def remove(self, entity: T) -> None:
        """Remove the first equal entity. Absent entities are skipped."""
        try:
            self._entities.remove(entity)
        except ValueError:
            logger.debug("Nothing to remove for %r", entity)
            return
        logger.debug("Removed %r", entity)

    def remove_range(self, entities: Iterable[T]) -> None:
        """Remove each entity independently, first match only."""
        # Materialize first so callers may pass this repository's own list
        for entity in list(entities):
            self.remove(entity)

    def count(self) -> int:
        return len(self._entities)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())
