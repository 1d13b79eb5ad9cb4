"""
Logging setup. The terminal belongs to the game, so records only ever
go to a file named by RIVER_RAID_LOG.
"""

import logging
import os
from typing import Optional

LOG_ENV_VAR = 'RIVER_RAID_LOG'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def setup_logging(path: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Configure the river_raid logger tree and return its root."""
    root = logging.getLogger('river_raid')
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    path = path or os.environ.get(LOG_ENV_VAR)
    if path:
        handler = logging.FileHandler(path, encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
    root.propagate = False
    return root
