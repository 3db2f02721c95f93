"""
Errors - Exception hierarchy cho llmcat.

Phan loai:
- Fatal (abort truoc khi dispatch task): TokenizerInitError,
  InvalidThreadCountError, InvalidConfigError, NoTargetsError
- Local (chi anh huong 1 task, render inline trong document):
  ContentTooLargeError, FetchError
- Sink (output/clipboard that bai, result trong memory van hop le):
  SinkError, ClipboardError
- Selection: FileSelectionError
"""

from typing import Any


class LlmcatError(Exception):
    """Base error cho moi loi cua llmcat."""

    pass


# ============================================
# Fatal errors
# ============================================


class FatalError(LlmcatError):
    """Loi toan cuc - huy ca lan chay."""

    pass


class TokenizerInitError(FatalError):
    """Khong khoi tao duoc tokenizer voi encoding da chon."""

    def __init__(self, encoding: str, reason: Any = None):
        self.encoding = encoding
        self.reason = reason
        message = f"Failed to initialize tokenizer with encoding '{encoding}'"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class TokenizerNotInitializedError(LlmcatError):
    """count_tokens() duoc goi truoc initialize() hoac sau teardown()."""

    pass


class InvalidThreadCountError(FatalError):
    """So threads khong hop le (phai la so nguyen >= 1)."""

    def __init__(self, threads: Any):
        self.threads = threads
        super().__init__(f"Invalid thread count: {threads!r} (must be >= 1)")


class InvalidConfigError(FatalError):
    """Gia tri cau hinh khong hop le (vd: fetch_timeout <= 0)."""

    def __init__(self, field: str, value: Any, requirement: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r} ({requirement})")


class NoTargetsError(FatalError):
    """Khong co target nao de aggregate."""

    def __init__(self) -> None:
        super().__init__("No targets given")


# ============================================
# Local (per-task) errors
# ============================================


class TaskError(LlmcatError):
    """Loi cua 1 task, khong duoc thoat ra khoi worker."""

    pass


class ContentTooLargeError(TaskError):
    """File vuot qua gioi han doc."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"FileTooBig ({size} bytes, limit {limit} bytes)")


class FetchError(TaskError):
    """HTTP fetch tra ve status khong phai 2xx."""

    def __init__(self, url: str, status_code: int, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}"
        if reason:
            detail += f" {reason}"
        super().__init__(detail)


# ============================================
# Sink / selection errors
# ============================================


class SinkError(LlmcatError):
    """Khong giao duoc result (ghi file / clipboard)."""

    pass


class ClipboardError(SinkError):
    """Tat ca cac phuong thuc clipboard deu that bai."""

    pass


class FileSelectionError(LlmcatError):
    """fzf khong duoc cai dat hoac bi huy."""

    pass
