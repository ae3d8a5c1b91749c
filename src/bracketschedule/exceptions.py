"""Exceptions for use in Bracket Schedule"""

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


# ========== Base Application Exception ==========


class BracketScheduleException(Exception):
    """Base exception for all Bracket Schedule errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Bracket Exceptions ==========


class BracketException(BracketScheduleException):
    """Base exception for bracket-related errors."""

    pass


class InvalidGameException(BracketException):
    """Raised when a game has both seeded teams and dependencies, or neither."""

    pass


class GameNotFoundException(BracketException):
    """Raised when a requested game id is not part of the bracket."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(BracketScheduleException):
    """Base exception for validation errors."""

    pass


class TimeFormatException(ValidationException):
    """Raised when a clock string is not of the form ``H:MM AM|PM``."""

    pass


class ScoreValidationException(ValidationException):
    """Raised when a score is non-numeric, negative, or a tie."""

    pass


# ========== Ledger Exceptions ==========


class LedgerException(BracketScheduleException):
    """Base exception for score ledger errors."""

    pass


class LedgerUnavailableException(LedgerException):
    """Raised when the score ledger cannot be read or written."""

    pass


class UnauthorizedException(LedgerException):
    """Raised when the ledger refuses a write for lack of authorization."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(BracketScheduleException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BracketScheduleException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
