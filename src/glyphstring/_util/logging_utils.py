"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the glyphstring debug log.

    Only writes when ``logging.debug`` is enabled (config file,
    ``GLYPHSTRING_DEBUG`` or ``--debug``).  Lines go to
    ``state_root()/glyphstring.log`` with a timestamp.  Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects callers.
    """
    try:
        import time

        from ..core.config import debug_log_enabled
        from ..core.paths import state_root

        if not debug_log_enabled():
            return
        log_path = state_root() / "glyphstring.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
