"""
llmcat - Main Entry Point

Gom files, thu muc va URLs thanh 1 document cho LLM, dem token bang
tiktoken, roi in ra / ghi file / copy vao clipboard.

Usage:
    llmcat [OPTIONS] [TARGETS...]
    llmcat              # khong co argument -> chon files bang fzf
    llmcat -t 8 -e node_modules --save-defaults  # luu default options
"""

import argparse
import sys
from typing import List, Optional, Sequence

from config import paths
from config.app_settings import AppSettings
from config.encoding_config import SUPPORTED_ENCODINGS
from config.paths import APP_NAME, APP_VERSION
from core.aggregation import aggregate_targets
from core.errors import FatalError, FileSelectionError, SinkError
from core.logging_config import flush_logs, log_info, set_debug_mode
from services.encoder_registry import tokenizer_session
from services.file_selector import select_files
from services.result_sink import deliver_result
from services.settings_manager import load_app_settings, save_app_settings

EXIT_OK = 0
EXIT_SINK_FAILED = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    """Tao argparse parser cho CLI."""
    encodings = "\n".join(
        f"  {enc.name:<13} {enc.description}" for enc in SUPPORTED_ENCODINGS
    )
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Concatenate files, directories and URLs into one LLM-ready "
            "document and count its tokens."
        ),
        epilog=(
            "TARGETS can be files, directory paths or URLs (http:// or https://).\n"
            "Without targets, fzf is used to select files interactively.\n\n"
            f"Common encodings:\n{encodings}"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("targets", nargs="*", metavar="TARGET")
    parser.add_argument(
        "-p", "--print", dest="print_output", action="store_true",
        help="Print results to stdout",
    )
    parser.add_argument(
        "-o", "--output", dest="output_path", metavar="FILE",
        help="Write results to FILE instead of the clipboard",
    )
    parser.add_argument(
        "-e", "--exclude", action="append", default=[], metavar="PATTERN",
        help="Exclude paths matching PATTERN (repeatable)",
    )
    parser.add_argument(
        "-t", "--threads", type=int, default=None, metavar="N",
        help="Number of worker threads (default: 4)",
    )
    parser.add_argument(
        "-f", "--fzf", dest="fzf_mode", action="store_true",
        help="Use fzf to select files interactively",
    )
    parser.add_argument(
        "--encoding", default=None, metavar="NAME",
        help="Tokenizer encoding (e.g. o200k_base, cl100k_base)",
    )
    parser.add_argument(
        "--count-files", action="store_true", help="Print total file count",
    )
    parser.add_argument(
        "--count-tokens", dest="count_tokens_only", action="store_true",
        help="Only count tokens without saving content",
    )
    parser.add_argument(
        "--save-defaults", action="store_true",
        help="Save --threads, --encoding and --exclude as defaults in settings.json",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}",
    )
    return parser


def settings_from_args(
    args: argparse.Namespace, defaults: Optional[AppSettings] = None
) -> AppSettings:
    """
    Merge CLI flags len default settings (tu settings.json).

    Args:
        args: Namespace tu build_parser()
        defaults: Settings load tu file; None = AppSettings()

    Returns:
        AppSettings cho lan chay nay
    """
    settings = defaults if defaults is not None else AppSettings()
    if args.threads is not None:
        settings.threads = args.threads
    if args.encoding:
        settings.encoding = args.encoding
    settings.exclude = [*settings.exclude, *args.exclude]
    settings.print_output = args.print_output
    settings.output_path = args.output_path
    settings.count_files = args.count_files
    settings.count_tokens_only = args.count_tokens_only
    settings.fzf_mode = args.fzf_mode
    return settings


def save_defaults(settings: AppSettings) -> None:
    """
    Luu cac persisted options cua lan chay nay lam default.

    Raises:
        SinkError: Khong ghi duoc settings file
    """
    if not save_app_settings(settings):
        raise SinkError(f"Cannot save defaults to {paths.SETTINGS_FILE}")
    print(f"Saved defaults to {paths.SETTINGS_FILE}", file=sys.stderr)


def run(argv: Sequence[str]) -> int:
    """
    Chay CLI voi argv (khong bao gom ten chuong trinh).

    Returns:
        Exit code: 0 thanh cong, 1 sink that bai, 2 loi fatal
    """
    parser = build_parser()
    args = parser.parse_args(list(argv))

    if args.verbose:
        set_debug_mode(True)

    settings = settings_from_args(args, load_app_settings())
    if not argv:
        settings.fzf_mode = True
    targets: List[str] = list(args.targets)

    try:
        settings.validate()

        if args.save_defaults:
            save_defaults(settings)
            if not targets and not settings.fzf_mode:
                return EXIT_OK

        with tokenizer_session(settings.encoding) as tokenizer:
            if settings.fzf_mode and not targets:
                targets = select_files(".", settings.exclude)
                if not targets:
                    print("No files selected.", file=sys.stderr)
                    parser.print_help(sys.stderr)
                    return EXIT_OK

            result = aggregate_targets(
                targets,
                tokenizer,
                exclude=settings.exclude,
                threads=settings.threads,
                fetch_timeout=settings.fetch_timeout,
            )

        deliver_result(result, settings)

    except (FatalError, FileSelectionError) as e:
        log_info(f"Aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FATAL
    except SinkError as e:
        log_info(f"Result not delivered: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SINK_FAILED

    return EXIT_OK


def main() -> None:
    try:
        code = run(sys.argv[1:])
    finally:
        flush_logs()
    sys.exit(code)


if __name__ == "__main__":
    main()
