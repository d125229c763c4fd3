"""
Tests for Rich console configuration and output helpers.

Tests the console setup, logging configuration and styled output functions.
"""

import pytest
import logging

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rich.logging import RichHandler

from rich_console import (
    console,
    NAVAL_THEME,
    setup_rich_logging,
    print_config_summary,
    print_result,
    print_completion_summary,
    print_error,
)


class TestConsoleSetup:
    """Tests for console initialization."""

    def test_console_exists(self):
        """Console should be initialized."""
        assert console is not None

    def test_theme_has_required_styles(self):
        """Theme should have required style definitions."""
        required_styles = ["info", "warning", "error", "success", "highlight", "coord", "bearing", "compass"]
        for style in required_styles:
            assert style in NAVAL_THEME.styles, f"Missing style: {style}"


class TestLogging:
    """Tests for Rich logging setup."""

    def test_setup_creates_logger(self):
        """Setup should configure root logger with WARNING level by default."""
        setup_rich_logging(verbose=False)
        logger = logging.getLogger()
        assert logger.level == logging.WARNING

    def test_verbose_sets_debug(self):
        """Verbose flag should set DEBUG level."""
        setup_rich_logging(verbose=True)
        logger = logging.getLogger()
        assert logger.level == logging.DEBUG

    def test_uses_rich_handler(self):
        """Root logger should route through a single RichHandler."""
        setup_rich_logging()
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)


class TestOutputFunctions:
    """Tests for styled output functions."""

    def test_print_config_summary(self, capsys):
        """Config summary should show direction and origin."""
        print_config_summary("in.json", "out.json", "to-map", adjust_origin=True, precision=3)
        out = capsys.readouterr().out
        assert "to-map" in out
        assert "top-left" in out

    def test_print_config_summary_escapes_paths(self, capsys):
        """Paths with brackets should print literally."""
        print_config_summary("[data]/in.json", "out.json", "to-engine")
        assert "[data]/in.json" in capsys.readouterr().out

    def test_print_result(self, capsys):
        print_result("Bearing", {"Degrees": "45.00", "Compass": "NE"})
        out = capsys.readouterr().out
        assert "45.00" in out
        assert "NE" in out

    def test_print_completion_summary(self, capsys):
        print_completion_summary(output_file="points.json", point_count=1500)
        assert "1,500" in capsys.readouterr().out

    def test_print_error_no_error(self):
        """Print error should not raise errors."""
        print_error("Test error message")

    def test_print_error_with_hint(self, capsys):
        print_error("Test error", hint="Try this instead")
        out = capsys.readouterr().out
        assert "Test error" in out
        assert "Try this instead" in out

    def test_print_error_with_markup_characters(self, capsys):
        """Messages containing brackets should not be parsed as markup."""
        print_error("Cannot interpret [1, 2, 3] as a point [bold]")
        assert "[bold]" in capsys.readouterr().out
