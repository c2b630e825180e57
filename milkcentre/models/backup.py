# milkcentre/models/backup.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class BackupSnapshot(BaseModel):
    data: Dict[str, List[Dict[str, Any]]]
    timestamp: Optional[str] = None


class ExportResult(BaseModel):
    success: bool
    data: Optional[Dict[str, List[Dict[str, Any]]]] = None
    timestamp: Optional[str] = None
    error: Optional[str] = None


class ImportResult(BaseModel):
    success: bool
    counts: Dict[str, int] = {}
    error: Optional[str] = None
