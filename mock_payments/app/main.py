import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.exceptions import register_exception_handlers
from .api.routes import meta_router, router as payments_router
from .core.config import Settings, get_settings
from .core.db import init_db

settings = get_settings()
logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield

# /docs serves the static endpoint description, so the OpenAPI UI moves aside.
app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan,
    docs_url="/swagger",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(meta_router)
app.include_router(payments_router)
register_exception_handlers(app)

def run(config: Optional[Settings] = None) -> None:
    config = config or settings
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    )
    try:
        server.run()
    except SystemExit:
        # uvicorn exits on its own when the socket cannot be bound
        if server.started:
            raise
    if not server.started:
        logger.error("server.bind_failed", extra={"host": config.host, "port": config.port})
        sys.exit(1)

if __name__ == "__main__":
    run()
