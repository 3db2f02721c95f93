"""
AppSettings - Typed settings dataclass cho llmcat.

Gom tat ca options cua mot lan chay (tu settings.json + CLI flags) vao mot
dataclass co type hints, validation va default values.

Modules:
- AppSettings: Dataclass chua toan bo options
- from_dict(): Tao AppSettings tu dict (settings.json)
- to_dict(): Chuyen doi cac field duoc persist thanh dict de luu xuong file
- validate(): Kiem tra cau hinh truoc khi dispatch bat ky task nao

Su dung:
    settings = load_app_settings()
    settings.validate()
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from config.encoding_config import DEFAULT_ENCODING
from core.errors import InvalidConfigError, InvalidThreadCountError

DEFAULT_THREADS = 4

# Cac field duoc luu trong settings.json. Options con lai chi co y nghia
# cho mot lan chay (print, output, count...) nen khong persist.
PERSISTED_FIELDS = ("threads", "encoding", "exclude", "fetch_timeout")

# Kieu hop le cua tung field khi doc tu file
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "threads": (int,),
    "encoding": (str,),
    "exclude": (list,),
    "print_output": (bool,),
    "output_path": (str, type(None)),
    "count_files": (bool,),
    "count_tokens_only": (bool,),
    "fzf_mode": (bool,),
    "fetch_timeout": (int, float, type(None)),
}


@dataclass
class AppSettings:
    """
    Typed settings cho llmcat.

    Moi field tuong ung voi mot CLI flag; cac field trong PERSISTED_FIELDS
    con co the dat default trong settings.json.
    """

    # --- Aggregation ---
    # So worker threads toi da (>= 1)
    threads: int = DEFAULT_THREADS
    # Ten tokenizer encoding (opaque string, truyen cho tiktoken)
    encoding: str = DEFAULT_ENCODING
    # Exclusion patterns, so khop theo thu tu
    exclude: list[str] = field(default_factory=list)
    # Timeout (giay) cho moi HTTP fetch. None = khong timeout
    fetch_timeout: Optional[float] = None

    # --- Output ---
    print_output: bool = False
    output_path: Optional[str] = None
    count_files: bool = False
    count_tokens_only: bool = False

    # --- Selection ---
    fzf_mode: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppSettings":
        """
        Tao AppSettings tu dict, chi lay cac keys trung voi field names.

        Value sai type bi bo qua va dung default thay the (khong raise).

        Args:
            data: Dict settings (thuong tu settings.json)

        Returns:
            AppSettings instance voi values tu dict, fallback ve defaults
        """
        filtered: dict[str, Any] = {}
        for key, value in data.items():
            expected = _FIELD_TYPES.get(key)
            if expected is None:
                continue

            # isinstance(True, int) == True, nhung bool khong phai thread count
            if isinstance(value, bool) and bool not in expected:
                continue

            if not isinstance(value, expected):
                continue

            if key == "exclude":
                value = [p for p in value if isinstance(p, str)]

            filtered[key] = value

        return cls(**filtered)

    def to_dict(self) -> dict[str, Any]:
        """
        Chuyen doi cac field duoc persist thanh dict de luu xuong file.

        Returns:
            Dict voi cac settings trong PERSISTED_FIELDS
        """
        return {
            "threads": self.threads,
            "encoding": self.encoding,
            "exclude": list(self.exclude),
            "fetch_timeout": self.fetch_timeout,
        }

    def validate(self) -> None:
        """
        Kiem tra cau hinh. Loi o day la fatal, phai raise truoc khi
        dispatch bat ky task nao.

        Raises:
            InvalidThreadCountError: threads < 1
            InvalidConfigError: fetch_timeout khong phai so duong
        """
        if isinstance(self.threads, bool) or not isinstance(self.threads, int):
            raise InvalidThreadCountError(self.threads)
        if self.threads < 1:
            raise InvalidThreadCountError(self.threads)

        timeout = self.fetch_timeout
        if timeout is not None and (
            isinstance(timeout, bool)
            or not isinstance(timeout, (int, float))
            or timeout <= 0
        ):
            raise InvalidConfigError("fetch_timeout", timeout, "must be > 0 or null")
