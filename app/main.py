from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

# Find .env next to the project or in the runtime cwd
POSSIBLE_ENV_PATHS = [
    Path(__file__).resolve().parent.parent / ".env",
    Path.cwd() / ".env",
]

for env_path in POSSIBLE_ENV_PATHS:
    if env_path.exists():
        load_dotenv(env_path, override=False)
        break

from app.config import Settings, settings  # noqa: E402
from app.database import Database  # noqa: E402
from app.exceptions import register_exception_handlers  # noqa: E402
from app.users.routers import router as auth_router  # noqa: E402
from app.company_settings.router import router as settings_router  # noqa: E402
from app.accounts.transactions.router import router as transactions_router  # noqa: E402
from app.accounts.debts.router import router as debts_router  # noqa: E402
from backup.backup import router as backup_router  # noqa: E402

_file_sinks = {}


def configure_logging(config: Settings):
    if config.LOG_FILE and config.LOG_FILE not in _file_sinks:
        _file_sinks[config.LOG_FILE] = logger.add(
            config.LOG_FILE, rotation="500 MB", level=config.LOG_LEVEL
        )


def create_app(config: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    config = config or settings
    configure_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup")
        app.state.database.open()
        yield
        app.state.database.close()
        logger.info("Application shutdown")

    app = FastAPI(
        title="Company Ledger API",
        description="Multi-tenant bookkeeping: transactions with tax, employee debts and per-user settings.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.database = database or Database(config.DATABASE_URL)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(auth_router, prefix="/auth", tags=["Auth"])
    app.include_router(settings_router, prefix="/settings", tags=["Settings"])
    app.include_router(transactions_router, prefix="/transactions", tags=["Transactions"])
    app.include_router(debts_router, prefix="/debts", tags=["Debts"])
    app.include_router(backup_router, prefix="/admin", tags=["Admin - Backup"])

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=3000)
