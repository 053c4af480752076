"""CLI entrypoint: load a map, run a program, print the final state as JSON.

Supports ``--config path/to/config.json``. CLI arguments override config-file
values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from lightbot.config.constants import DEFAULT_MAX_DEPTH
from lightbot.config.types import InterpreterConfig
from lightbot.domain.map_loader import read_map_file
from lightbot.errors import LightBotError
from lightbot.session import LightBot

logger = logging.getLogger(__name__)

ERROR_EXIT_CODE = 2
"""Process exit status for map or program failures."""

# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def read_program_file(path: Path) -> list[str]:
    """Read one instruction per line; blank lines and ``#`` comments are dropped."""
    program: list[str] = []
    for line in path.read_text().splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            program.append(stripped)
    return program


def _resolve_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object], default: int | None
) -> int | None:
    """Pick an integer setting from the CLI, then the config file, then ``default``."""
    if cli_val is not None:
        return cli_val
    raw = file_cfg.get(key, default)
    if (raw is None and default is None) or (isinstance(raw, int) and not isinstance(raw, bool)):
        return raw
    raise ValueError(f"{key} must be an integer in the config file, got {raw!r}")


def _resolve_flag(cli_val: bool | None, key: str, file_cfg: dict[str, object]) -> bool:
    """Pick an on/off setting from the CLI, then the config file; defaults to on."""
    if cli_val is not None:
        return cli_val
    raw = file_cfg.get(key, True)
    if not isinstance(raw, bool):
        raise ValueError(f"{key} must be true or false in the config file, got {raw!r}")
    return raw


def build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> InterpreterConfig:
    """Resolve an ``InterpreterConfig`` from parsed CLI args and a config dict."""
    return InterpreterConfig(
        max_depth=_resolve_int(args.max_depth, "max_depth", file_cfg, DEFAULT_MAX_DEPTH),
        max_steps=_resolve_int(args.max_steps, "max_steps", file_cfg, None),
        validate_nesting=_resolve_flag(args.validate_nesting, "validate_nesting", file_cfg),
        reject_recursion=_resolve_flag(args.reject_recursion, "reject_recursion", file_cfg),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a LightBot program on a map")
    parser.add_argument("--map", type=Path, required=True, help="Map text file")
    parser.add_argument(
        "--program", type=Path, required=True, help="Program file, one instruction per line"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--max-depth", type=int, default=None)
    parser.add_argument("--max-steps", type=int, default=None)
    parser.add_argument(
        "--validate-nesting", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument(
        "--reject-recursion", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--verbose", action="store_true", help="Log interpreter progress")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        config = build_config(args, file_cfg)
        map_rows = read_map_file(args.map)
        program = read_program_file(args.program)
    except FileNotFoundError as exc:
        parser.error(f"File not found: {exc.filename}")
    except ValueError as exc:
        parser.error(str(exc))

    try:
        bot = LightBot(map_rows, config)
        result = bot.run(program)
    except LightBotError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return ERROR_EXIT_CODE

    logger.info("Program finished after %d step(s)", result.steps)
    x, y = bot.query_position()
    summary = {
        "position": [x, y],
        "map": bot.query_map(),
        "steps": result.steps,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
