"""
Shared fixtures cho llmcat tests.

- FakeTokenizer: tokenizer deterministic (1 token / whitespace-separated word),
  ghi lai moi lan goi de kiem tra thread safety va lifecycle
- sample_tree: cay thu muc cua scenario co ban (a.txt + sub/b.txt)
"""

import threading
from pathlib import Path
from typing import List

import pytest

from services.interfaces.tokenization_service import ITokenizationService
from core.errors import TokenizerInitError, TokenizerNotInitializedError


class FakeTokenizer(ITokenizationService):
    """ITokenizationService gia lap: dem so tu, khong can tiktoken."""

    def __init__(self, fail_on_init: bool = False):
        self.fail_on_init = fail_on_init
        self.initialized_with: List[str] = []
        self.teardown_calls = 0
        self.counted: List[str] = []
        self._name = ""
        self._ready = False
        self._lock = threading.Lock()

    def initialize(self, encoding_name: str) -> None:
        self.initialized_with.append(encoding_name)
        if self.fail_on_init:
            raise TokenizerInitError(encoding_name, "boom")
        self._name = encoding_name
        self._ready = True

    def count_tokens(self, text: str) -> int:
        if not self._ready:
            raise TokenizerNotInitializedError("not initialized")
        with self._lock:
            self.counted.append(text)
        return len(text.split())

    def teardown(self) -> None:
        self.teardown_calls += 1
        self._ready = False

    @property
    def encoding_name(self) -> str:
        return self._name


@pytest.fixture
def fake_tokenizer() -> FakeTokenizer:
    """FakeTokenizer da initialize."""
    tokenizer = FakeTokenizer()
    tokenizer.initialize("fake_base")
    return tokenizer


@pytest.fixture
def sample_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Tao cay:
        a.txt      -> "hi"
        sub/b.txt  -> "bye"
    va chdir vao tmp_path de targets co the la relative paths.
    """
    (tmp_path / "a.txt").write_text("hi", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("bye", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
