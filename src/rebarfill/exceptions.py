"""Exception hierarchy for rebarfill."""


class RebarFillError(Exception):
    """Base exception for all rebarfill errors."""

    pass


class DrawingError(RebarFillError):
    """Errors related to drawing loading or saving."""

    pass


class DrawingLoadError(DrawingError):
    """Error loading a drawing file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load drawing '{path}': {reason}")


class DrawingSaveError(DrawingError):
    """Error saving a drawing file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save drawing '{path}': {reason}")


class WrongWorkspaceError(RebarFillError):
    """The drawing is not in model space."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Switch '{path}' to MODEL space before generating bars")


class SelectionError(RebarFillError):
    """Errors related to the selection store."""

    pass


class SelectionStoreUnavailableError(SelectionError):
    """Selection store is missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Selection store '{path}' unavailable: {reason}")


class SelectionStoreEmptyError(SelectionError):
    """Selection store holds no records."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No click data found in '{path}'")


class MissingIdentifierError(SelectionError):
    """Last selection record has no external id."""

    def __init__(self, db_id: int | None = None) -> None:
        self.db_id = db_id
        super().__init__(f"externalId missing in last selection record (dbId={db_id})")


class EntityError(RebarFillError):
    """Errors related to the selected entity."""

    pass


class InvalidHandleError(EntityError):
    """External id is not a hexadecimal handle."""

    def __init__(self, handle: str) -> None:
        self.handle = handle
        super().__init__(f"Invalid entity handle '{handle}'")


class EntityNotFoundError(EntityError):
    """No entity with the given handle exists in the drawing."""

    def __init__(self, handle: str) -> None:
        self.handle = handle
        super().__init__(f"Entity '{handle}' not found")


class NoBoundaryFoundError(EntityError):
    """Boundary extraction produced no curve primitives."""

    def __init__(self, entity_type: str, handle: str | None = None) -> None:
        self.entity_type = entity_type
        self.handle = handle
        super().__init__(f"No boundary curves extracted from {entity_type} '{handle}'")
