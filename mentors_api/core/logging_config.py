import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_console_handler: logging.Handler | None = None


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Install the application's console handler on the root logger.

    Handlers installed by the host process (uvicorn, pytest) are left alone;
    calling this again swaps out only the handler it added last time.
    """
    global _console_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler()
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(_console_handler)

    return root_logger
