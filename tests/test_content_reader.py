"""
Tests cho core.aggregation.content_reader va task_processor.

requests.get duoc mock - khong co network trong tests.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from core.aggregation.content_reader import fetch_url, read_file_bounded
from core.aggregation.task_processor import format_header, process_task
from core.aggregation.types import FileTask
from core.constants import USER_AGENT
from core.errors import ContentTooLargeError, FetchError


def fake_response(status: int, body: bytes = b"", reason: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = body
    response.reason = reason
    return response


class TestReadFileBounded:
    def test_read_text(self, tmp_path: Path):
        f = tmp_path / "a.txt"
        f.write_text("xin chao", encoding="utf-8")
        assert read_file_bounded(str(f)) == "xin chao"

    def test_empty_file(self, tmp_path: Path):
        f = tmp_path / "empty.txt"
        f.write_bytes(b"")
        assert read_file_bounded(str(f)) == ""

    def test_invalid_utf8_replaced(self, tmp_path: Path):
        f = tmp_path / "bad.txt"
        f.write_bytes(b"ok\xff\xfeok")
        assert read_file_bounded(str(f)) == "ok\ufffd\ufffdok"

    def test_exactly_at_limit(self, tmp_path: Path):
        f = tmp_path / "edge.txt"
        f.write_bytes(b"x" * 16)
        assert read_file_bounded(str(f), limit=16) == "x" * 16

    def test_over_limit_raises(self, tmp_path: Path):
        f = tmp_path / "big.txt"
        f.write_bytes(b"x" * 17)
        with pytest.raises(ContentTooLargeError) as exc_info:
            read_file_bounded(str(f), limit=16)
        assert exc_info.value.size == 17
        assert exc_info.value.limit == 16

    def test_missing_file_raises_oserror(self, tmp_path: Path):
        with pytest.raises(OSError):
            read_file_bounded(str(tmp_path / "missing.txt"))


class TestFetchUrl:
    def test_success_sends_user_agent(self):
        with patch(
            "core.aggregation.content_reader.requests.get",
            return_value=fake_response(200, b"remote body"),
        ) as get:
            assert fetch_url("https://example.com/x") == "remote body"

        get.assert_called_once_with(
            "https://example.com/x",
            headers={"User-Agent": USER_AGENT},
            timeout=None,
        )

    def test_any_2xx_is_success(self):
        with patch(
            "core.aggregation.content_reader.requests.get",
            return_value=fake_response(204, b""),
        ):
            assert fetch_url("https://example.com/empty") == ""

    @pytest.mark.parametrize("status", [301, 404, 500])
    def test_non_2xx_raises(self, status):
        with patch(
            "core.aggregation.content_reader.requests.get",
            return_value=fake_response(status, b"nope", "Reason"),
        ):
            with pytest.raises(FetchError) as exc_info:
                fetch_url("https://example.com/x")
        assert exc_info.value.status_code == status

    def test_timeout_passed_through(self):
        with patch(
            "core.aggregation.content_reader.requests.get",
            return_value=fake_response(200, b"x"),
        ) as get:
            fetch_url("https://example.com/x", timeout=2.5)
        assert get.call_args.kwargs["timeout"] == 2.5


class TestProcessTask:
    """Test process_task(): fragment format va loi inline."""

    def test_file_fragment(self, tmp_path: Path, fake_tokenizer):
        f = tmp_path / "a.txt"
        f.write_text("hello big world", encoding="utf-8")
        task = FileTask(path=str(f), origin_target=str(f))

        outcome = process_task(task, fake_tokenizer)

        assert outcome.ok
        assert outcome.token_count == 3
        assert outcome.fragment == f"[ {f} ]\nhello big world\n\n"

    def test_relative_task_uses_joined_path(self, tmp_path: Path, fake_tokenizer):
        (tmp_path / "b.txt").write_text("bye", encoding="utf-8")
        task = FileTask(path="b.txt", origin_target=str(tmp_path), is_full_path=False)

        outcome = process_task(task, fake_tokenizer)

        assert outcome.fragment.startswith(f"[ {tmp_path / 'b.txt'} ]\n")
        assert outcome.token_count == 1

    def test_unreadable_file_inline_error(self, tmp_path: Path, fake_tokenizer):
        task = FileTask(path=str(tmp_path / "gone.txt"), origin_target="x")

        outcome = process_task(task, fake_tokenizer)

        assert not outcome.ok
        assert outcome.token_count == 0
        assert "Error reading file:" in outcome.fragment
        assert outcome.fragment.endswith("\n\n")
        assert fake_tokenizer.counted == []

    def test_oversized_file_inline_error(self, tmp_path: Path, fake_tokenizer):
        f = tmp_path / "big.txt"
        f.write_bytes(b"word " * 10)
        task = FileTask(path=str(f), origin_target=str(f))

        outcome = process_task(task, fake_tokenizer, max_file_bytes=8)

        assert outcome.token_count == 0
        assert "Error reading file: FileTooBig" in outcome.fragment
        assert fake_tokenizer.counted == []

    def test_url_fragment(self, fake_tokenizer):
        url = "https://example.com/readme"
        task = FileTask(path=url, origin_target=url, is_url=True)
        with patch(
            "core.aggregation.content_reader.requests.get",
            return_value=fake_response(200, b"remote words here"),
        ):
            outcome = process_task(task, fake_tokenizer)

        assert outcome.fragment == f"[ URL: {url} ]\nremote words here\n\n"
        assert outcome.token_count == 3

    def test_url_http_error_inline(self, fake_tokenizer):
        url = "https://example.com/missing"
        task = FileTask(path=url, origin_target=url, is_url=True)
        with patch(
            "core.aggregation.content_reader.requests.get",
            return_value=fake_response(404, b"not found page", "Not Found"),
        ):
            outcome = process_task(task, fake_tokenizer)

        assert outcome.token_count == 0
        assert outcome.error == "Error fetching URL: HTTP 404 Not Found"
        assert "not found page" not in outcome.fragment

    def test_url_connection_error_inline(self, fake_tokenizer):
        url = "https://unreachable.invalid/"
        task = FileTask(path=url, origin_target=url, is_url=True)
        with patch(
            "core.aggregation.content_reader.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            outcome = process_task(task, fake_tokenizer)

        assert not outcome.ok
        assert "connection refused" in outcome.fragment

    def test_format_header(self):
        assert format_header(FileTask(path="a", origin_target="a")) == "[ a ]"
        url_task = FileTask(path="http://x", origin_target="http://x", is_url=True)
        assert format_header(url_task) == "[ URL: http://x ]"
