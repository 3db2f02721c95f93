"""
Result Sink - Ban giao AggregateResult cho downstream.

Dispositions:
- count_tokens_only: chi in token count (va file count neu yeu cau)
- print_output: ghi document ra stdout, ket hop duoc voi 1 trong 2 cai duoi
- output_path: ghi document ra file
- khong print va khong output_path: copy vao clipboard

Ghi file hoac copy clipboard that bai -> SinkError. AggregateResult trong
memory van nguyen ven, caller tu quyet dinh exit code.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TextIO, Tuple

from config.app_settings import AppSettings
from core.aggregation.types import AggregateResult
from core.errors import ClipboardError, SinkError
from core.logging_config import log_error, log_info
from services.clipboard_utils import copy_to_clipboard

ClipboardFunc = Callable[[str], Tuple[bool, str]]

CAT_BANNER = (
    "\n"
    "      |\\      _,,,---,,_\n"
    "ZZZzz /,`.-'`'    -.  ;-;;,_\n"
    "     |,4-  ) )-,_. ,\\ (  `'-'\n"
    "    '---''(_/--'  `-'\\_) \n"
)


@dataclass
class SinkReport:
    """
    Ket qua ban giao.

    Attributes:
        printed: Document da duoc ghi ra stdout
        written_to: Duong dan file da ghi (None neu khong ghi)
        copied: Document da duoc copy vao clipboard
        message: Summary da in ra stderr
    """

    printed: bool = False
    written_to: Optional[str] = None
    copied: bool = False
    message: str = ""


def format_summary(
    headline: str,
    result: AggregateResult,
    count_files: bool,
    with_token_line: bool = True,
) -> str:
    """Summary co cat banner, token count va (tuy chon) file count."""
    lines = [CAT_BANNER + headline]
    if with_token_line:
        lines.append(f"Token count: {result.total_tokens}")
    if count_files:
        lines.append(f"Processed {result.file_count} files")
    return "\n".join(lines) + "\n"


def write_output_file(path: str, result: AggregateResult) -> None:
    """
    Ghi document ra file (tao thu muc cha neu can).

    Raises:
        SinkError: Khong ghi duoc file
    """
    try:
        output = Path(path)
        if output.parent and not output.parent.exists():
            output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(result.to_bytes())
    except OSError as e:
        log_error(f"[ResultSink] Cannot write output file {path}", e)
        raise SinkError(f"Cannot write output file {path}: {e}") from e


def deliver_result(
    result: AggregateResult,
    settings: AppSettings,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    clipboard: ClipboardFunc = copy_to_clipboard,
) -> SinkReport:
    """
    Ban giao result theo settings.

    Args:
        result: AggregateResult da hoan tat
        settings: Options cua lan chay
        stdout: Stream nhan document (default sys.stdout)
        stderr: Stream nhan summary (default sys.stderr)
        clipboard: Ham copy clipboard (inject cho tests)

    Returns:
        SinkReport mo ta nhung gi da lam

    Raises:
        SinkError: Ghi file that bai
        ClipboardError: Copy clipboard that bai
    """
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    report = SinkReport()

    if settings.count_tokens_only:
        report.message = format_summary(
            f"Meow! Token count: {result.total_tokens}",
            result,
            settings.count_files,
            with_token_line=False,
        )
        stderr.write(report.message)
        return report

    if settings.print_output:
        stdout.write(result.document)
        stdout.flush()
        report.printed = True

    if settings.output_path:
        write_output_file(settings.output_path, result)
        report.written_to = settings.output_path
        log_info(f"[ResultSink] Wrote {result.file_count} files to {settings.output_path}")
        report.message = format_summary(
            f"Meow! Content written to {settings.output_path}",
            result,
            settings.count_files,
        )
    elif not settings.print_output:
        success, message = clipboard(result.document)
        if not success:
            raise ClipboardError(message)
        report.copied = True
        report.message = format_summary(
            "Meow! Content copied to clipboard!", result, settings.count_files
        )

    if report.message:
        stderr.write(report.message)
    return report
