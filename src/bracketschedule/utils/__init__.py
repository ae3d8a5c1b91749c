"""Shared utilities for Bracket Schedule."""

# Bracket Schedule
# Copyright (C) 2025  Bracket Schedule developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring the package handler on first use.

    The handler is attached to the ``bracketschedule`` package logger only
    once, so every module can simply do ``logger = setup_logger(__name__)``.
    """
    global _configured
    if not _configured:
        package_logger = logging.getLogger("bracketschedule")
        if not package_logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
        _configured = True
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("bracketschedule").setLevel(level)


__all__ = ["setup_logger", "set_verbose", "LOG_FORMAT"]
