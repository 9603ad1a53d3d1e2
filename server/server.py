# FastAPI server which serves the content of one configured text file.
# uvicorn server:create_app --factory
# The app is built by a factory, so a missing `FILE_PATH` stops startup instead of failing per request.

import logging
from typing import Optional
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

# Helper Modules:
import config
import files
import logger


def create_app(file_path: Optional[str] = None, log: Optional[logging.Logger] = None) -> FastAPI:
    """Build the FastAPI application serving one text file.

    Args:
        file_path (Optional[str]): File to serve. Defaults to `config.FILE_PATH`.
        log (Optional[logging.Logger]): Logger to use. If None, one is created here
            and closed when the application shuts down.

    Returns:
        FastAPI: The application, with the file route registered.

    Raises:
        config.ConfigurationError: If no file path is configured.
    """

    file_path = config.resolve_file_path(config.FILE_PATH if file_path is None else file_path)

    owns_logger = log is None
    if owns_logger:
        log = logger.get_logger(
            name=config.LOG_NAME,
            log_to_console=config.LOG_TO_CONSOLE,
            log_file=config.LOG_FILE,
        )

    # --------------------------------------------------------------------------
    # FastAPI Startup:
    # --------------------------------------------------------------------------

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Define the lifespan context manager for startup/shutdown"""

        # [ Startup ]
        log.debug(f"[LifeSpan] Serving '{file_path}' on {config.FILE_ROUTE}.")

        # [ Lifespan ]
        yield

        # [ Shutdown ]
        log.debug("[LifeSpan] Shutting down file server...")
        if owns_logger:
            logger.close_logger(log)

    app = FastAPI(lifespan=lifespan)

    # --------------------------------------------------------------------------
    # Basic API Endpoints:
    # --------------------------------------------------------------------------

    @app.get("/")
    async def root():
        """Root endpoint to check if the server is running."""
        return {"message": "File server is running!"}

    app.include_router(
        files.build_file_router(
            file_path=file_path,
            log=log,
            route=config.FILE_ROUTE,
            encoding=config.FILE_ENCODING,
        )
    )

    return app


if __name__ == "__main__":
    uvicorn.run(
        "server:create_app",
        factory=True,
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
    )
