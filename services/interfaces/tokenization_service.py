"""
ITokenizationService - Interface cho dich vu dem token.

Dinh nghia contract ma bat ky TokenizationService nao cung phai tuan theo.
Cho phep dependency injection va testability (mock/stub).

Lifecycle:
- initialize(): Load encoding. Loi -> TokenizerInitError (fatal, khong fallback)
- count_tokens(): Dem token, side-effect-free, goi duoc tu nhieu threads
- teardown(): Giai phong encoder, goi DUNG 1 lan
"""

from abc import ABC, abstractmethod


class ITokenizationService(ABC):
    """
    Interface cho dich vu tokenization.

    Moi implementation phai dam bao:
    - count_tokens() thread-safe sau khi initialize() thanh cong
    - Khong fallback sang encoding khac khi initialize() that bai
    """

    @abstractmethod
    def initialize(self, encoding_name: str) -> None:
        """
        Load tokenizer cho encoding.

        Args:
            encoding_name: Ten encoding (opaque string, VD: "cl100k_base")

        Raises:
            TokenizerInitError: Encoding khong load duoc
        """
        ...

    @abstractmethod
    def count_tokens(self, text: str) -> int:
        """
        Dem so token trong mot doan text.

        Args:
            text: Doan text can dem token

        Returns:
            So luong tokens (>= 0)

        Raises:
            TokenizerNotInitializedError: Chua initialize hoac da teardown
        """
        ...

    @abstractmethod
    def teardown(self) -> None:
        """Giai phong tokenizer."""
        ...

    @property
    @abstractmethod
    def encoding_name(self) -> str:
        """Ten encoding dang dung ("" neu chua initialize)."""
        ...
