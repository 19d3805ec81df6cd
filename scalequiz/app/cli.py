from __future__ import annotations

"""CLI for the scale quiz using SessionManager and QuizScreen."""

import argparse
import logging
import sys
from typing import Optional

from .. import __version__
from ..config.config import ConfigError, QuizConfig, load_config, validate_config
from ..util.randomness import make_rng, resolve_seed
from .pages import PageContext
from .screen import QuizScreen
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

EXPLAIN_LOG_FILE = "scalequiz-explain.log"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="scalequiz", description="Music theory quiz in the terminal")
    p.add_argument("--config", default=None, help="Path to YAML config merged over the defaults")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible questions")
    p.add_argument("--explain", action="store_true", help="Write trace lines for every transition")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def configure_logging(cfg: QuizConfig, *, explain: bool = False) -> None:
    """Send log records to a file, never to stdout (the screen owns it)."""
    root = logging.getLogger("scalequiz")
    root.setLevel(cfg.logging.level)
    for h in list(root.handlers):
        root.removeHandler(h)

    log_file = cfg.logging.file or (EXPLAIN_LOG_FILE if explain else None)
    if log_file is None:
        root.addHandler(logging.NullHandler())
    else:
        try:
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot open log file {log_file}: {e}") from e
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    root.propagate = False

    if explain:
        from .explain import enable as explain_enable
        explain_enable(True)
        logging.getLogger("scalequiz.explain").setLevel(logging.INFO)


def main(argv: list[str] | None = None, screen: Optional[QuizScreen] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"scalequiz {__version__}")
        return 0

    try:
        cfg = validate_config(load_config(args.config))
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(cfg, explain=args.explain)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # --seed, then SEED, then random.seed from the config file
    seed = resolve_seed(args.seed)
    if seed is None:
        seed = cfg.random.seed
    context = PageContext(rng=make_rng(seed), tonic_pool=tuple(cfg.tonic_notes()))
    sm = SessionManager(context)
    screen = screen or QuizScreen(text_col=cfg.screen.text_col, text_row=cfg.screen.text_row)

    try:
        with screen.session():
            sm.run(screen)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except EOFError:
        # Ctrl-D quits like q
        logger.info("End of input")
        return 0
    except OSError as e:
        logger.exception("Terminal I/O failed")
        print(f"ERROR: terminal I/O failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
