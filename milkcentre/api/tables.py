# milkcentre/api/tables.py

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, Depends

from milkcentre.api.deps import get_store, respond
from milkcentre.db.store import TableStore
from milkcentre.models.tables import DeleteRequest, OperationResult, QueryParams

router = APIRouter(prefix="/tables", tags=["tables"])


@router.post("/{table}", response_model=OperationResult, response_model_exclude_unset=True)
def save_records(
    table: str,
    data: Union[Dict[str, Any], List[Dict[str, Any]]] = Body(...),
    store: TableStore = Depends(get_store),
):
    """
    Insert or update one record, or a list of records in one transaction.
    """
    return respond(store.save(table, data))


@router.post("/{table}/query", response_model=OperationResult, response_model_exclude_unset=True)
def query_records(
    table: str,
    params: Optional[QueryParams] = Body(default=None),
    store: TableStore = Depends(get_store),
):
    """
    Equality-filtered query with optional ordering and limit/offset.
    """
    query = params.model_dump(exclude_none=True) if params else {}
    return respond(store.query(table, query))


@router.post("/{table}/delete", response_model=OperationResult, response_model_exclude_unset=True)
def delete_records(
    table: str,
    request: DeleteRequest,
    store: TableStore = Depends(get_store),
):
    return respond(store.delete(table, request.ids))


@router.put("/{table}/import", response_model=OperationResult, response_model_exclude_unset=True)
def import_records(
    table: str,
    data: List[Dict[str, Any]] = Body(...),
    store: TableStore = Depends(get_store),
):
    """
    Replace the whole table with the given records.
    """
    return respond(store.import_table(table, data))


@router.get("/{table}/{record_id}", response_model=OperationResult, response_model_exclude_unset=True)
def get_record(
    table: str,
    record_id: str,
    store: TableStore = Depends(get_store),
):
    # data is null, not 404, when the record does not exist
    return respond(store.get_by_id(table, record_id))


@router.delete("/{table}/{record_id}", response_model=OperationResult, response_model_exclude_unset=True)
def delete_record(
    table: str,
    record_id: str,
    store: TableStore = Depends(get_store),
):
    return respond(store.delete(table, record_id))
