# utils/crashlog.py
import os, sys, atexit, faulthandler, datetime, traceback, threading
from typing import Optional

_fault_file = None
_log_dir: Optional[str] = None


def set_log_dir(path: Optional[str]):
    global _log_dir
    _log_dir = path


def log_dir() -> str:
    d = _log_dir or os.path.join(os.getcwd(), "logs")
    os.makedirs(d, exist_ok=True)
    return d


def _new_log_path(prefix: str = "crash") -> str:
    stamp = datetime.datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    return os.path.join(log_dir(), f"{prefix}-{stamp}.txt")


def setup_crashlog():
    """faulthandler dump plus uncaught-exception reports under log_dir()."""
    global _fault_file
    if _fault_file is None:
        try:
            _fault_file = open(_new_log_path("native"), "w", encoding="utf-8")
            faulthandler.enable(_fault_file, all_threads=True)
            atexit.register(teardown_crashlog)
        except OSError:
            _fault_file = None

    def _hook(exc_type, exc, tb):
        try:
            with open(_new_log_path("crash"), "w", encoding="utf-8") as out:
                out.write("UNCAUGHT EXCEPTION\n")
                out.write("=" * 60 + "\n")
                traceback.print_exception(exc_type, exc, tb, file=out)
        finally:
            sys.__excepthook__(exc_type, exc, tb)
    sys.excepthook = _hook

    def _thread_hook(args):
        _hook(args.exc_type, args.exc_value, args.exc_traceback)
    threading.excepthook = _thread_hook


def teardown_crashlog():
    """Stop the native dump and drop its file if nothing crashed."""
    global _fault_file
    if _fault_file is None:
        return
    faulthandler.disable()
    path = _fault_file.name
    _fault_file.close()
    _fault_file = None
    if os.path.getsize(path) == 0:
        os.remove(path)


def log_exception(title: str, exc: BaseException) -> str:
    path = _new_log_path("error")
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"[{title}] {type(exc).__name__}: {exc}\n")
        out.write("Traceback:\n")
        out.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return path
