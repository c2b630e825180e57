# milkcentre/api/backup.py

from fastapi import APIRouter, Depends

from milkcentre.api.deps import get_store, respond
from milkcentre.db.store import TableStore
from milkcentre.models.backup import BackupSnapshot, ExportResult, ImportResult
from milkcentre.services.backup import export_data, import_data

router = APIRouter(prefix="/backup", tags=["backup"])


@router.get("/export", response_model=ExportResult, response_model_exclude_unset=True)
def export_backup(store: TableStore = Depends(get_store)):
    """
    Return every table's rows plus the export timestamp.
    """
    return respond(export_data(store))


@router.post("/import", response_model=ImportResult, response_model_exclude_unset=True)
def import_backup(snapshot: BackupSnapshot, store: TableStore = Depends(get_store)):
    """
    Replace each table present in the snapshot. Unknown table keys are ignored.
    """
    return respond(import_data(store, snapshot.data))
