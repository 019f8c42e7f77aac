"""
Application controller for Source Mirror.

Ties together configuration, logging, the HTTP sender, the folder
watcher and the sync loop.
"""

import logging
import logging.handlers
import sys

from source_mirror import __app_name__, __version__
from source_mirror.config import Config
from source_mirror.sender import MessageSender
from source_mirror.service import SyncLoop
from source_mirror.watcher import DirectoryWatcher

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: Config) -> None:
    """Configure the stderr handler and, if set, a rotating file log."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    fmt = logging.Formatter(LOG_FORMAT)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(fmt)
    root_logger.addHandler(sh)

    if config.log_file:
        fh = logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_log_size_mb * 1024 * 1024,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root_logger.addHandler(fh)


class App:
    """Central orchestrator: one folder, one endpoint, one sync loop."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.sender = MessageSender(config.api_url)
        self.loop = SyncLoop(
            config.directory,
            self.sender,
            debounce_seconds=config.debounce_seconds,
            watcher=DirectoryWatcher(config.directory),
        )

    def run(self) -> int:
        """
        Mirror until interrupted.

        Returns the process exit status.  Scan and transport errors are
        fatal: they are logged and end the run with status 1.
        """
        logger.info("%s %s starting.", __app_name__, __version__)
        logger.info("Mirroring '%s' to %s", self.config.directory, self.config.api_url)
        try:
            self.loop.run()
        except KeyboardInterrupt:
            logger.info("Interrupted.")
            return 0
        except Exception:
            logger.exception("Fatal error; stopping.")
            return 1
        finally:
            self.sender.close()
        return 0
