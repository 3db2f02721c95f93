"""
Encoding Configuration - Danh sach cac tokenizer encodings pho bien

Dung cho help text cua CLI. Ten encoding la opaque string: bat ky ten nao
tiktoken nhan dien deu duoc chap nhan, khong chi cac ten trong danh sach nay.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class EncodingConfig:
    """
    Mo ta mot tokenizer encoding.

    Attributes:
        name: Ten encoding truyen cho tiktoken (VD: "cl100k_base")
        description: Cac model dung encoding nay
    """

    name: str
    description: str


DEFAULT_ENCODING = "cl100k_base"

SUPPORTED_ENCODINGS: List[EncodingConfig] = [
    EncodingConfig(name="o200k_base", description="GPT-4o, GPT-4.1, o-series"),
    EncodingConfig(name="cl100k_base", description="GPT-4, GPT-3.5-turbo"),
    EncodingConfig(name="p50k_base", description="text-davinci-003, Codex"),
    EncodingConfig(name="p50k_edit", description="text-davinci-edit-001"),
    EncodingConfig(name="r50k_base", description="GPT-2, GPT-3"),
]
