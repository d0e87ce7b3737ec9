"""Selection record model.

A selection record is one user pick of a drawing entity, logged by the
viewer service into the selection store.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ClickRecord:
    """One logged selection.

    Attributes:
        external_id: Entity handle as a hexadecimal string
        db_id: Viewer database id of the picked object
        timestamp: Epoch milliseconds of the pick
    """

    external_id: str
    db_id: int | None = None
    timestamp: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClickRecord":
        """Deserialize from a selection store entry.

        Missing keys map to empty/None values; validation of the id is
        left to the caller.
        """
        external_id = data.get("externalId")
        return cls(
            external_id="" if external_id is None else str(external_id),
            db_id=data.get("dbId"),
            timestamp=data.get("timestamp"),
        )
