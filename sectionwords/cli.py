"""
Command line driver: prompts, flags and printing
"""

import argparse
import asyncio
from typing import Callable, List, Optional, Set

from .config import (DEFAULT_END_MARKER, DEFAULT_HEADING_TAG, DEFAULT_START_MARKER,
                     DEFAULT_TOP_N, DEFAULT_URL, ReportConfig)
from .counting import normalize_exclusions
from .fetcher import DEFAULT_TIMEOUT
from .monitoring import LogManager
from .pipeline import ReportBuilder, ReportResult
from .report import format_failure, format_table

TOP_N_PROMPT = "Enter the number of top words to return (default is 10): "
EXCLUDE_PROMPT = "Enter words to exclude (separated by commas): "


def parse_top_n(text: str, default: int = DEFAULT_TOP_N) -> int:
    """Blank means the default; anything else must be an integer (ValueError otherwise)"""
    if not text or not text.strip():
        return default
    return int(text)


def parse_exclusions(text: str) -> Set[str]:
    """Comma separated stoplist; blank input gives {''}, which excludes nothing"""
    return normalize_exclusions(text.split(','))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Count the most frequent words in one section of a web page'
    )
    parser.add_argument('--url', default=DEFAULT_URL, help='Page to fetch')
    parser.add_argument('--start-marker', default=DEFAULT_START_MARKER,
                        help='Text of the heading that opens the section')
    parser.add_argument('--end-marker', default=DEFAULT_END_MARKER,
                        help='Text of the heading that closes the section')
    parser.add_argument('--heading-tag', default=DEFAULT_HEADING_TAG,
                        help='Tag name of the section headings')
    parser.add_argument('--top', help='Number of top words (prompted for when omitted)')
    parser.add_argument('--exclude', help='Comma separated words to exclude (prompted for when omitted)')
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT,
                        help='Total fetch timeout in seconds')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--log-dir', help='Also write dated log files here')
    parser.add_argument('--export', help='Write the report as JSON to this path')
    return parser


def build_config(args: argparse.Namespace, prompt: Callable[[str], str] = input) -> ReportConfig:
    """Resolve flags, prompting for the word count and stoplist when not given"""
    top_text = args.top if args.top is not None else prompt(TOP_N_PROMPT)
    top_n = parse_top_n(top_text)

    exclude_text = args.exclude if args.exclude is not None else prompt(EXCLUDE_PROMPT)
    excluded = parse_exclusions(exclude_text)

    return ReportConfig(
        url=args.url,
        start_marker=args.start_marker,
        end_marker=args.end_marker,
        heading_tag=args.heading_tag,
        top_n=top_n,
        excluded_words=excluded,
        timeout=args.timeout
    )


def render(result: ReportResult) -> str:
    """Results table, or the failure message when the fetch failed"""
    if not result.ok:
        category = result.fetch.error_type.value if result.fetch.error_type else 'unknown_error'
        return format_failure(category, result.fetch.error)
    return format_table(result.rows)


async def run(config: ReportConfig, log_manager: Optional[LogManager] = None) -> ReportResult:
    report = (ReportBuilder.from_config(config)
              .with_log_manager(log_manager)
              .build())
    return await report.run()


def main(argv: Optional[List[str]] = None, prompt: Callable[[str], str] = input) -> int:
    """Entry point; returns the process exit status"""
    args = build_arg_parser().parse_args(argv)
    log_manager = LogManager(log_level=args.log_level, log_dir=args.log_dir)

    config = build_config(args, prompt)
    result = asyncio.run(run(config, log_manager))
    print(render(result))

    if args.export:
        log_manager.export_report_json(result.to_dict(), args.export)
    return 0
