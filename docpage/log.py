# Copyright 2021-2023 Jason Tackaberry
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

__all__ = ['log', 'set_level']

import logging
import sys

# ANSI color codes by log level, used only when stderr is a terminal.
COLORS = {
    logging.DEBUG: '\033[90m',
    logging.INFO: '\033[36m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[1;31m',
}
RESET = '\033[0m'

class ColorFormatter(logging.Formatter):
    """
    Formats log records as "level: message", coloring the level name if the
    stream is attached to a terminal.
    """
    def __init__(self):
        super().__init__('%(levelname)s: %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        record.levelname = levelname.lower()
        if sys.stderr.isatty() and record.levelno in COLORS:
            record.levelname = COLORS[record.levelno] + record.levelname + RESET
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class StderrHandler(logging.StreamHandler):
    """
    Writes to whatever sys.stderr is at the time of logging, rather than what it was
    when the handler was created.
    """
    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _make_logger() -> logging.Logger:
    logger = logging.getLogger('docpage')
    handler = StderrHandler()
    handler.setFormatter(ColorFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    # Don't duplicate output through the root logger if the application configures one.
    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    log.setLevel(level)


log = _make_logger()
