"""Network participant record model."""

from pydantic import BaseModel, ConfigDict


class NodeRecord(BaseModel):
    """One participant entry as served by the nodes endpoint.

    Records are frozen so every derived view shares the exact objects held by
    the record store.
    """

    model_config = ConfigDict(frozen=True)

    operator: str
    status: bool
    uptime: float
    fee: float
