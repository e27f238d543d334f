#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the diaglog package.

This script demonstrates leveled logging, diagnostic error rendering and
output redirection.
"""

import io

from diaglog import DiagnosticError, LogFormat, Options, Severity, SilentLogger, create_logger, new


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("diaglog Examples")
    print("=" * 60)
    print()

    # Example 1: Basic terminal logging
    print("Example 1: Terminal logger with INFO level")
    print("-" * 60)
    logger = new("example-service", Options())

    logger.info("Service started successfully")
    logger.infof("Processing request %s for user %d", "req-123", 456)
    logger.warnf("Rate limit approaching: %d/%d", 95, 100)
    logger.debug("This debug message won't appear (below INFO level)")
    print()

    # Example 2: Diagnostic errors on the error stream
    print("Example 2: Diagnostic error (written to stderr)")
    print("-" * 60)
    logger.error(
        DiagnosticError(
            "1001",
            Severity.ERROR,
            short_descriptions=["Unable to connect to the database"],
            long_descriptions=["The service could not open a connection to localhost:5432."],
            probable_causes=["The database is not running", "The port is blocked"],
            remediations=["Start the database", "Check firewall rules"],
        )
    )
    logger.flush()
    print()

    # Example 3: Caller info and level changes
    print("Example 3: Caller info and runtime level changes")
    print("-" * 60)
    debug_logger = new(
        "debug-service",
        Options(log_level=Severity.WARN, enable_caller_info=True),
    )
    debug_logger.info("Hidden at WARN")
    debug_logger.set_level(Severity.DEBUG)
    debug_logger.debug("Now debug messages are visible")
    print(f"Current level: {debug_logger.get_level().name}")
    print()

    # Example 4: Redirecting output
    print("Example 4: Redirecting info output to a buffer")
    print("-" * 60)
    buffer = io.StringIO()
    debug_logger.update_log_output(buffer)
    debug_logger.info("Captured in memory")
    debug_logger.update_log_output(None)
    print(f"Buffer contains: {buffer.getvalue().strip()!r}")
    print()

    # Example 5: JSON output from environment-style configuration
    print("Example 5: JSON logger")
    print("-" * 60)
    json_logger = create_logger(name="json-service", log_format=LogFormat.JSON, level="INFO")
    json_logger.info("Structured entry")
    print()

    # Example 6: Silent logger for testing
    print("Example 6: SilentLogger for testing")
    print("-" * 60)
    test_logger = SilentLogger(name="test-service")

    test_logger.info("Test message 1")
    test_logger.warn("Test warning")
    test_logger.error(DiagnosticError("500", short_descriptions=["Test error"]))

    print(f"Total logs captured: {len(test_logger.logs)}")
    print(f"Has 'Test message 1': {test_logger.has_log('Test message 1')}")
    print(f"Warning logs: {len(test_logger.get_logs(level='WARN'))}")

    print("\nLogged messages:")
    for log in test_logger.logs:
        extra = f" ({log['extra']})" if "extra" in log else ""
        print(f"  [{log['level']}] {log['message']}{extra}")
    print()

    print("=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
