"""Main entry point for direct module execution."""

import sys
import logging

from .cli import cli
from .config import get_log_file
from .exceptions import GitswapError
from .ui_common import print_error

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Log to ~/.gitswap/gitswap.log, and warnings to stderr.

    If the log file cannot be opened, only stderr is used.
    """
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.WARNING)
    handlers: list[logging.Handler] = [stream_handler]

    log_file = get_log_file()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file))
        file_error = None
    except OSError as e:
        file_error = e

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
    if file_error is not None:
        logger.warning(f"Cannot write log file {log_file}: {file_error}")


def main() -> None:
    """Main entry point."""
    try:
        setup_logging()

        logger.debug("Starting gitswap")
        cli()
    except GitswapError as e:
        print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Fatal error", exc_info=True)
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
