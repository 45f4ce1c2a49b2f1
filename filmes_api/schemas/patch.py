from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class PatchField(str, Enum):
    TITLE = "title"
    GENRE = "genre"
    DURATION = "duration"


class PatchOperation(BaseModel):
    """One JSON Patch operation as received on the wire.

    `op` and `path` are kept as plain strings so that unknown operations and
    paths reach the patch interpreter and are reported as malformed patches.
    """
    op: str
    path: str
    value: Any = None
    from_: Optional[str] = Field(default=None, alias="from")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"op": "replace", "path": "/title", "value": "Matrix Reloaded"}}
    )
