"""
# Files.py
- This module reads the configured text file from disk and turns the outcome into a response.
- Reads go through `anyio.Path`, so the event loop is never blocked on disk I/O.
"""

import logging
from anyio import Path as AsyncPath
from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse, Response

NOT_FOUND_MESSAGE = "File not found."
SERVER_ERROR_MESSAGE = "Internal server error."


async def read_text_file(file_path: str, log: logging.Logger, encoding: str = "utf-8") -> Response:
    """Read the whole file as text and wrap it in a response.
    Args:
        file_path (str): Path of the file to read. Checked for existence on every call.
        log (logging.Logger): Logger that receives the error entries.
        encoding (str): Text encoding of the file.
    Returns:
        Response: 200 with the file text, 404 if the path does not exist,
            or 500 if the file could not be read or decoded.
    """

    path = AsyncPath(file_path)

    try:
        # `exists()` still raises for errors other than "missing", e.g. EACCES on a parent:
        if not await path.exists():
            log.error(f"File not found at {file_path}!")
            return JSONResponse(content={"error": NOT_FOUND_MESSAGE}, status_code=404)

        # Bytes + decode, so that line endings reach the client untouched:
        raw = await path.read_bytes()
        content = raw.decode(encoding)
    except Exception as e:
        log.error(f"Error reading file {file_path}: {repr(e)}")
        return JSONResponse(content={"error": SERVER_ERROR_MESSAGE}, status_code=500)

    return PlainTextResponse(content=content, status_code=200)


def build_file_router(
    file_path: str,
    log: logging.Logger,
    route: str = "/api/file",
    encoding: str = "utf-8",
) -> APIRouter:
    """Build the router serving `file_path` on `GET route`.
    The path and logger are bound here once; nothing is looked up per request.
    """

    router = APIRouter()

    @router.get(route, response_class=PlainTextResponse)
    async def get_content():
        """Endpoint to get the content of the configured file.
        - Get request, no body and no query parameters.
        - Return `text/plain` file content, or JSON `{"error": ""}` with 404 / 500.
        """
        return await read_text_file(file_path=file_path, log=log, encoding=encoding)

    return router
