# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # keep top-level modules importable when run as a script

import argparse
import logging
from typing import List, Optional

from config import AppConfig, LogConfig, OutputConfig, ReaderConfig
from app import App
from utils.crashlog import log_dir, set_log_dir, setup_crashlog, log_exception

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _init_logging(cfg: LogConfig):
    root = logging.getLogger()
    if root.handlers:
        return

    # stdout carries the channel output, logs go to stderr
    logging.basicConfig(level=getattr(logging, cfg.level.upper(), logging.INFO),
                        format=LOG_FORMAT, stream=sys.stderr)
    if not cfg.to_file:
        return
    try:
        from logging.handlers import RotatingFileHandler
        fh = RotatingFileHandler(os.path.join(log_dir(), "readmidi.log"),
                                 maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(fh)
    except OSError as e:
        logging.warning("file logging disabled: %s", e)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="readmidi",
                                 description="Decode Standard MIDI Files into note events and tempo info.")
    ap.add_argument("files", nargs="+", metavar="FILE")
    ap.add_argument("--format", choices=["text", "json"], default="text")
    ap.add_argument("--workers", type=int, default=1, help="interpret tracks in parallel")
    ap.add_argument("--error-channel", default="error")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-dir", default=None)
    ap.add_argument("--no-log-file", action="store_true")
    return ap


def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        reader=ReaderConfig(workers=max(1, args.workers)),
        output=OutputConfig(format=args.format, error_channel=args.error_channel),
        log=LogConfig(level=args.log_level, to_file=not args.no_log_file, log_dir=args.log_dir),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)

    set_log_dir(cfg.log.log_dir)
    if cfg.log.to_file:
        setup_crashlog()
    _init_logging(cfg.log)

    app = App(cfg)
    failed = 0
    for path in args.files:
        if app.read_midi_file(path) is None:
            failed += 1
    return 1 if failed else 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except Exception as e:
        try:
            log_exception("Top-level exception", e)
        except OSError:
            pass
        logging.error("uncaught exception: %s", e, exc_info=True)
        raise
