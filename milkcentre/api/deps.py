# milkcentre/api/deps.py

from fastapi import Request
from fastapi.responses import JSONResponse

from milkcentre.db.errors import NotInitializedError
from milkcentre.db.store import TableStore

NOT_INITIALIZED = str(NotInitializedError())


def get_store(request: Request) -> TableStore:
    return request.app.state.store


def respond(result: dict):
    """
    Pass successful results through to the response model; failed results
    keep their body but get an error status.
    """
    if result["success"]:
        return result
    status_code = 503 if result.get("error") == NOT_INITIALIZED else 400
    return JSONResponse(status_code=status_code, content=result)
