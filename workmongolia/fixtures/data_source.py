"""Injectable data sources for domain entities"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from workmongolia.core.exceptions import NotFoundException, ValidationException
from workmongolia.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

# Fields maintained by the source itself, under both attribute and wire names
MANAGED_FIELDS = frozenset({"id", "created_at", "createdAt", "updated_at", "updatedAt"})


class DataSource(Protocol[T]):
    """Capability interface every entity source implements"""

    def list(self) -> List[T]: ...

    def get(self, entity_id: int) -> T: ...

    def create(self, data: Dict[str, Any]) -> T: ...

    def update(self, entity_id: int, changes: Dict[str, Any]) -> T: ...

    def delete(self, entity_id: int) -> None: ...


class InMemoryDataSource(Generic[T]):
    """
    Data source backed by a per-instance dict.

    Records are re-validated through ``model`` on every write, so a source can
    never hold an entity that breaks the domain invariants. Each instance owns
    copies of its seed records; nothing is shared between instances.
    """

    def __init__(
        self,
        model: Type[T],
        records: Iterable[T] = (),
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Args:
            model: Pydantic model used to validate records
            records: Seed records
            clock: Returns the current time; defaults to UTC now
        """
        self.model = model
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self._records: Dict[int, T] = {}
        for record in records:
            self._records[record.id] = record.model_copy(deep=True)

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def list(self) -> List[T]:
        return [self._records[key].model_copy(deep=True) for key in sorted(self._records)]

    def get(self, entity_id: int) -> T:
        record = self._records.get(entity_id)
        if record is None:
            raise NotFoundException(f"{self.entity_name} not found: {entity_id}")
        return record.model_copy(deep=True)

    def create(self, data: Dict[str, Any]) -> T:
        now = self.clock()
        payload = self._by_field_name(data)
        payload.update(
            id=max(self._records, default=0) + 1,
            created_at=now,
            updated_at=now,
        )
        record = self._validate(payload)
        self._records[record.id] = record

        logger.info(f"Created {self.entity_name}: {record.id}")
        return record.model_copy(deep=True)

    def update(self, entity_id: int, changes: Dict[str, Any]) -> T:
        current = self.get(entity_id)
        payload = current.model_dump()
        payload.update(self._by_field_name(changes))
        payload["updated_at"] = self.clock()

        record = self._validate(payload)
        self._records[entity_id] = record

        logger.info(f"Updated {self.entity_name}: {entity_id}")
        return record.model_copy(deep=True)

    def delete(self, entity_id: int) -> None:
        if self._records.pop(entity_id, None) is None:
            raise NotFoundException(f"{self.entity_name} not found: {entity_id}")
        logger.info(f"Deleted {self.entity_name}: {entity_id}")

    def _validate(self, payload: Dict[str, Any]) -> T:
        try:
            return self.model.model_validate(payload)
        except ValidationError as e:
            raise ValidationException(
                f"Invalid {self.entity_name} data",
                details={"errors": e.errors(include_url=False, include_context=False)}
            )

    def _by_field_name(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map wire aliases to attribute names and drop managed fields"""
        aliases = {field.alias: name for name, field in self.model.model_fields.items() if field.alias}
        normalized = {}
        for key, value in data.items():
            if key in MANAGED_FIELDS:
                continue
            normalized[aliases.get(key, key)] = value
        return normalized
