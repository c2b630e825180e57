# milkcentre/main.py

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from milkcentre.api.backup import router as backup_router
from milkcentre.api.deps import get_store
from milkcentre.api.tables import router as tables_router
from milkcentre.config import get_settings
from milkcentre.db.store import TableStore
from milkcentre.log_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings)

    # One store per process, shared by every request
    store = TableStore(settings)
    store.initialize()
    app.state.store = store
    yield
    store.dispose()


app = FastAPI(
    title=get_settings().APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
def health_check(store: TableStore = Depends(get_store)):
    return {
        "status": "ok" if store.is_initialized else "degraded",
        "database": str(store.db_path),
        "initialized": store.is_initialized,
    }


app.include_router(tables_router)
app.include_router(backup_router)
