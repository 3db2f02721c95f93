"""
TokenizationService - Concrete implementation cua ITokenizationService.

Dung tiktoken. Moi trang thai (encoder, encoding name) duoc quan ly o
instance level, khong co global state.

Special tokens (vd "<|endoftext|>") trong noi dung file duoc dem nhu
token binh thuong thay vi raise loi.
"""

import threading
from typing import Any, Optional

import tiktoken

from core.errors import TokenizerInitError, TokenizerNotInitializedError
from core.logging_config import log_debug, log_info
from services.interfaces.tokenization_service import ITokenizationService


class TokenizationService(ITokenizationService):
    """
    Dich vu dem token dua tren tiktoken - thread-safe.

    Encoder chi duoc set/clear trong initialize()/teardown() duoi lock;
    tiktoken.Encoding.encode() an toan khi goi dong thoi tu nhieu workers.
    """

    def __init__(self) -> None:
        self._encoder: Optional[Any] = None
        self._encoding_name: str = ""
        self._lock = threading.Lock()

    # ================================================================
    # Public API - ITokenizationService contract
    # ================================================================

    def initialize(self, encoding_name: str) -> None:
        """
        Load tiktoken encoding.

        Args:
            encoding_name: Ten encoding (VD: "cl100k_base", "o200k_base")

        Raises:
            TokenizerInitError: Ten encoding khong hop le hoac khong tai duoc
        """
        try:
            encoder = tiktoken.get_encoding(encoding_name)
        except Exception as e:
            # tiktoken raise ValueError cho ten sai, va loi network/IO khi
            # tai BPE file lan dau - tat ca deu la fatal
            raise TokenizerInitError(encoding_name, e) from e

        with self._lock:
            self._encoder = encoder
            self._encoding_name = encoding_name

        log_info(f"[TokenizationService] Using tiktoken encoding '{encoding_name}'")

    def count_tokens(self, text: str) -> int:
        """
        Dem so token trong text.

        Args:
            text: Doan text can dem token

        Returns:
            So luong tokens
        """
        encoder = self._encoder
        if encoder is None:
            raise TokenizerNotInitializedError(
                "count_tokens() called before initialize()"
            )
        if not text:
            return 0
        return len(encoder.encode(text, allowed_special="all"))

    def teardown(self) -> None:
        with self._lock:
            self._encoder = None
            name, self._encoding_name = self._encoding_name, ""
        log_debug(f"[TokenizationService] Released encoding '{name}'")

    @property
    def encoding_name(self) -> str:
        return self._encoding_name
