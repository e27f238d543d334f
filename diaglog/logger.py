# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract logger interface."""

from abc import ABC, abstractmethod
from typing import Any, TypeAlias

from .severity import Severity

# A plain message, an exception (diagnostic or not), or None
Message: TypeAlias = str | BaseException | None


class Logger(ABC):
    """Abstract base class for loggers."""

    @abstractmethod
    def debug(self, message: Message) -> None:
        """Log a debug-level message.

        Args:
            message: The log message or an exception to render
        """
        pass

    @abstractmethod
    def debugf(self, template: str, *args: Any) -> None:
        """Log a debug-level message built from a printf-style template."""
        pass

    @abstractmethod
    def info(self, message: Message) -> None:
        """Log an info-level message.

        Args:
            message: The log message or an exception to render
        """
        pass

    @abstractmethod
    def infof(self, template: str, *args: Any) -> None:
        """Log an info-level message built from a printf-style template."""
        pass

    @abstractmethod
    def warn(self, message: Message) -> None:
        """Log a warning-level message.

        Args:
            message: The log message or an exception to render
        """
        pass

    @abstractmethod
    def warnf(self, template: str, *args: Any) -> None:
        """Log a warning-level message built from a printf-style template."""
        pass

    @abstractmethod
    def error(self, message: Message) -> None:
        """Log an error-level message.

        Diagnostic errors are unpacked so their descriptions, probable
        causes and remediations are rendered along with the message.

        Args:
            message: The log message or an exception to render
        """
        pass

    @abstractmethod
    def errorf(self, template: str, *args: Any) -> None:
        """Log an error-level message built from a printf-style template."""
        pass

    @abstractmethod
    def fatal(self, message: Message) -> None:
        """Log a fatal-level message, then terminate the process."""
        pass

    @abstractmethod
    def fatalf(self, template: str, *args: Any) -> None:
        """Log a fatal-level templated message, then terminate the process."""
        pass

    @abstractmethod
    def set_level(self, level: Severity | int | str) -> None:
        """Set the minimum severity that will be emitted."""
        pass

    @abstractmethod
    def get_level(self) -> Severity:
        """Return the minimum severity that will be emitted."""
        pass
