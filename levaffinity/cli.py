"""Command line interface: compare two words or score candidates against one."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .batch import match_all
from .distance import affinity, distance

__all__ = ["main", "SAMPLE_KEYS"]

SAMPLE_KEYS = (
    "config_path",
    "log_level",
    "max_connections",
    "timeout_duration",
    "enable_cache",
    "cache_size",
    "thread_count",
    "db_host",
    "db_port",
    "db_username",
    "db_password",
    "api_key",
    "api_secret",
    "session_timeout",
    "retry_attempts",
    "retry_delay",
    "log_file_path",
    "temp_directory",
    "backup_interval",
    "enable_logging",
    "default_language",
    "supported_languages",
    "date_format",
    "time_zone",
    "max_upload_size",
    "allowed_file_types",
    "maintenance_mode",
    "admin_email",
    "smtp_server",
    "smtp_port",
    "smtp_username",
    "smtp_password",
    "enable_ssl",
    "oauth_client_id",
    "oauth_client_secret",
    "session_cookie_name",
    "csrf_token",
    "password_salt",
    "encryption_key",
    "enable_debug_mode",
    "static_files_path",
    "templates_path",
    "enable_compression",
    "compression_algorithm",
    "default_currency",
    "payment_gateway_url",
    "enable_two_factor_auth",
    "max_login_attempts",
    "account_lockout_duration",
    "password_reset_token_expiry",
)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levaffinity",
        description="Levenshtein distance and affinity between strings.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    compare = commands.add_parser("compare", help="compare two strings")
    compare.add_argument("first")
    compare.add_argument("second")
    compare.add_argument(
        "-c",
        "--case-sensitive",
        action="store_true",
        help="distinguish upper and lower case",
    )

    search = commands.add_parser(
        "search", help="score candidates against a word (case-insensitive)"
    )
    search.add_argument("word")
    search.add_argument("candidates", nargs="*")
    search.add_argument(
        "-f",
        "--file",
        help="read candidates from a file, one per line ('-' for standard input)",
    )
    search.add_argument(
        "-w", "--workers", type=_positive_int, default=1, help="number of threads"
    )
    search.add_argument(
        "-t", "--time", action="store_true", help="report the elapsed time"
    )
    return parser


def _format_percent(value: float) -> str:
    return f"{value * 100:.4f}%"


def _read_candidates(source: str) -> List[str]:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def _run_compare(args: argparse.Namespace) -> int:
    edit_distance = distance(args.first, args.second, args.case_sensitive)
    score = affinity(len(args.first), len(args.second), edit_distance)
    print(f"Distance: {edit_distance}")
    print(f"Affinity: {_format_percent(score)}")
    return 0


def _run_search(args: argparse.Namespace) -> int:
    candidates: List[str] = list(args.candidates)
    if args.file is not None:
        try:
            candidates.extend(_read_candidates(args.file))
        except OSError as error:
            print(f"levaffinity: {error}", file=sys.stderr)
            return 1
    if not candidates:
        candidates = list(SAMPLE_KEYS)

    start = time.perf_counter_ns()
    matches = match_all(args.word, candidates, None, args.workers)
    elapsed_ns = time.perf_counter_ns() - start

    for match in matches:
        print(
            f"Distance: {match.distance}, "
            f"Affinity: {_format_percent(match.affinity)}. {match.text}"
        )
    if args.time:
        print(f"Elapsed: {elapsed_ns / 1e9:.6f} s ({elapsed_ns} ns)")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "compare":
        return _run_compare(args)
    return _run_search(args)


if __name__ == "__main__":
    sys.exit(main())