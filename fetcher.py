"""
# Fetcher.py
- Client side helpers for the Streamlit viewer.
- Requests the file content from the server and applies the result to the session state.
"""

import os
import requests
from typing import Optional, Tuple, MutableMapping

SERVER_ADDRESS: str = os.getenv("FILE_SERVER_ADDRESS", "http://127.0.0.1:8000")
FILE_ROUTE: str = "/api/file"

# No timeout unless one is configured:
_timeout = os.getenv("FILE_SERVER_TIMEOUT")
REQUEST_TIMEOUT: Optional[float] = float(_timeout) if _timeout else None


def fetch_file_content(
    server_ip: str = SERVER_ADDRESS,
    route: str = FILE_ROUTE,
    timeout: Optional[float] = REQUEST_TIMEOUT,
) -> Tuple[bool, str]:
    """Get the content of the served file.
    Args:
        server_ip (str): Base address of the file server.
        route (str): Route of the file endpoint.
        timeout (Optional[float]): Request timeout in seconds, None waits forever.
    Returns:
        tuple: A tuple containing:
            - bool: True if the content was received, False otherwise.
            - str: The file content or the error message.
    """

    try:
        response = requests.get(f"{server_ip.rstrip('/')}{route}", timeout=timeout)

        if not response.ok:
            return False, f"Failed to load file: {response.status_code} {response.reason}"

        return True, response.text

    except Exception as e:
        return False, str(e)


def store_fetch_result(state: MutableMapping, status: bool, message: str) -> None:
    """Apply a finished fetch to the viewer state.
    - On success, the content is set and any error cleared.
    - On failure, only the error is set and the content is left as it was.
    """

    if status:
        state["content"] = message
        state["error"] = None
    else:
        state["error"] = message
