# milkcentre/models/tables.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class QueryParams(BaseModel):
    where: Optional[Dict[str, Any]] = None
    orderBy: Optional[str] = Field(
        default=None,
        description="column, 'column asc' or 'column desc'; comma-separated for several",
    )
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0, description="Only applied with limit")


class DeleteRequest(BaseModel):
    ids: List[str]


class OperationResult(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    deleted: Optional[int] = None
    count: Optional[int] = None
