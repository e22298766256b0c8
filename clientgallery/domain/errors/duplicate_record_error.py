"""Exception raised by repositories on unique constraint violations."""


class DuplicateRecordError(Exception):
    """A save collided with an existing row on a unique column.

    Repositories raise this instead of leaking driver exceptions so that
    handlers can turn a lost race (two requests claiming the same slug)
    into a ConflictError result.

    Attributes:
        entity: Entity name (``Gallery``, ``Client``...).
        field: Constraint column(s), when known.
    """

    def __init__(self, entity: str, field: str | None = None) -> None:
        self.entity = entity
        self.field = field
        target = f" ({field})" if field else ""
        super().__init__(f"Duplicate {entity}{target}")
