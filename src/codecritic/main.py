from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .analyze import ReviewOrchestrator
from .config import CodeCriticConfig
from .constants import ExitCode
from .errors import CodeCriticError
from .logging import PROCESS_LOGGER


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="codecritic",
        description="Review a code snippet with an LLM, falling back to built-in rules.",
    )
    parser.add_argument("file", nargs="?", help="Source file to review (default: stdin)")
    parser.add_argument("--language", default=None, help="Language tag (detected when omitted)")
    parser.add_argument(
        "--provider",
        default=None,
        help="Preferred provider: primary/secondary (or openai/claude)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    return parser.parse_args(argv)


def _read_code(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


async def async_main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        code = _read_code(args.file)
    except OSError as exc:
        PROCESS_LOGGER.error("Could not read input", path=args.file, error=str(exc))
        return ExitCode.ERROR

    try:
        config = CodeCriticConfig()
    except ValidationError as exc:
        PROCESS_LOGGER.error("Invalid configuration", error=str(exc), error_count=exc.error_count())
        return ExitCode.ERROR

    orchestrator = ReviewOrchestrator(config)
    try:
        result = await orchestrator.analyze(code, args.language, args.provider)
    except CodeCriticError as exc:
        PROCESS_LOGGER.error("Invalid request", error=str(exc))
        return exc.exit_code

    indent = 2 if args.pretty else None
    sys.stdout.write(json.dumps(result.to_dict(), indent=indent, ensure_ascii=False) + "\n")
    return ExitCode.SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point."""
    return int(asyncio.run(async_main(argv)))


if __name__ == "__main__":
    sys.exit(main())
