"""
Content Reader - Doc noi dung cho 1 task (file local hoac URL).

Functions:
- read_file_bounded(): Doc toan bo file, toi da MAX_FILE_BYTES
- fetch_url(): 1 HTTP GET voi User-Agent co dinh, chi chap nhan 2xx

Ca hai deu raise exception khi loi; task_processor bat va render inline.
Khong co cancellation: fetch_url mac dinh khong timeout.
"""

import os
from typing import Optional

import requests

from core.constants import MAX_FILE_BYTES, USER_AGENT
from core.errors import ContentTooLargeError, FetchError


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def read_file_bounded(path: str, limit: int = MAX_FILE_BYTES) -> str:
    """
    Doc toan bo file, tu choi file lon hon limit.

    Kiem tra size truoc (fstat), sau do doc toi da limit + 1 bytes de bat
    truong hop file lon len giua luc stat va luc doc.

    Args:
        path: Duong dan file
        limit: So bytes toi da

    Returns:
        Noi dung file (utf-8, ky tu loi duoc replace)

    Raises:
        ContentTooLargeError: File vuot qua limit
        OSError: Khong mo/doc duoc file
    """
    with open(path, "rb") as f:
        size = os.fstat(f.fileno()).st_size
        if size > limit:
            raise ContentTooLargeError(size, limit)

        data = f.read(limit + 1)
        if len(data) > limit:
            raise ContentTooLargeError(len(data), limit)

    return _decode(data)


def fetch_url(url: str, timeout: Optional[float] = None) -> str:
    """
    Fetch 1 URL bang HTTP GET, doc toan bo body vao memory.

    Args:
        url: URL can fetch
        timeout: Timeout (giay), None = doi vo han

    Returns:
        Response body (utf-8, ky tu loi duoc replace)

    Raises:
        FetchError: Status khong phai 2xx
        requests.RequestException: Loi ket noi/network
    """
    response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    try:
        if not 200 <= response.status_code < 300:
            raise FetchError(url, response.status_code, response.reason or "")
        return _decode(response.content)
    finally:
        response.close()
