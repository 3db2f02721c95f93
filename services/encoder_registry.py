"""
Encoder Registry - Provider cho TokenizationService voi scoped lifecycle.

Tokenizer la tai nguyen toan cuc theo encoding cua mot lan chay. Thay vi
global state, caller lay no qua tokenizer_session():

    with tokenizer_session("cl100k_base") as tokenizer:
        result = aggregate_targets(targets, tokenizer)

- initialize() chay truoc khi caller nhan duoc tokenizer
- teardown() chay DUNG 1 lan tren moi exit path (thanh cong, exception)
- initialize() that bai -> TokenizerInitError, khong teardown gi ca
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from config.encoding_config import DEFAULT_ENCODING
from services.interfaces.tokenization_service import ITokenizationService
from services.tokenization_service import TokenizationService

ServiceFactory = Callable[[], ITokenizationService]


def create_tokenization_service() -> ITokenizationService:
    """Factory mac dinh: TokenizationService dung tiktoken."""
    return TokenizationService()


@contextmanager
def tokenizer_session(
    encoding_name: str = DEFAULT_ENCODING,
    service: Optional[ITokenizationService] = None,
    factory: ServiceFactory = create_tokenization_service,
) -> Iterator[ITokenizationService]:
    """
    Context manager: initialize tokenizer, yield, teardown dung 1 lan.

    Args:
        encoding_name: Ten encoding
        service: Service co san (inject cho tests); None = tao moi qua factory
        factory: Factory tao service khi service=None

    Yields:
        ITokenizationService da initialize

    Raises:
        TokenizerInitError: initialize() that bai
    """
    tokenizer = service if service is not None else factory()
    tokenizer.initialize(encoding_name)
    try:
        yield tokenizer
    finally:
        tokenizer.teardown()
