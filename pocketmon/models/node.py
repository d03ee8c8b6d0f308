from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, StringConstraints


# Heights are signed 64-bit on the node side.
MAX_HEIGHT = 2**63 - 1


class NodeMetrics(BaseModel):
    """Normalized state of the local node for one cycle."""

    model_config = ConfigDict(frozen=True)

    chain: str = "pocket"
    app_version: str
    moniker: str
    height: int = Field(ge=0, le=MAX_HEIGHT)
    latest_block_time: str
    catching_up: bool
    balance: float = Field(allow_inf_nan=False)
    jailed: bool
    service_url: str
    address: str = Field(min_length=1)
    public_key: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.chain} ({self.app_version}), height:{self.height}"


# ── RPC payload schemas ──────────────────────────────
#
# Only the fields read by NodeCollector are declared; anything else in the
# payload is ignored.

BlockHeight = Annotated[str, StringConstraints(strict=True, pattern=r"^[0-9]{1,19}$")]
FiniteFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class NodeInfo(BaseModel):
    id: StrictStr
    moniker: StrictStr


class SyncInfo(BaseModel):
    latest_block_height: BlockHeight
    latest_block_time: StrictStr
    catching_up: StrictBool


class StatusResult(BaseModel):
    node_info: NodeInfo
    sync_info: SyncInfo


class StatusResponse(BaseModel):
    """``GET /status`` on the consensus RPC."""

    result: StatusResult


class NodeQueryResponse(BaseModel):
    """``POST /v1/query/node``."""

    public_key: StrictStr
    jailed: StrictBool
    service_url: StrictStr


class BalanceResponse(BaseModel):
    """``POST /v1/query/balance``."""

    balance: FiniteFloat | StrictInt
