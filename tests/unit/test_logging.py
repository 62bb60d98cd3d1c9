"""
Tests for structlog configuration and library log events

Покрывает:
- level_from_verbosity
- Без configure_logging() библиотека ничего не печатает
- configure_logging(): JSON/консольный вывод в stderr, фильтр уровня
- Debug-события сборки и рендеринга
"""

import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from src.builder import FormatBuilder
from src.core.domain import FormatLocale, FormatRole, NumberFieldPlacement, NumberFieldSpec
from src.core.logging import LIBRARY_LOGGER_NAME, configure_logging, level_from_verbosity
from src.render import render_number

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(autouse=True)
def reset_logging():
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    saved = (list(library_logger.handlers), library_logger.level, library_logger.propagate)
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    handlers, level, propagate = saved
    library_logger.handlers = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate


def render_us_currency(value):
    spec = FormatBuilder().build_from_locale(
        FormatLocale.US, FormatRole.CURRENCY, NumberFieldSpec.auto_size()
    )
    return render_number(value, spec)


# =============================================================================
# DEFAULT (UNCONFIGURED)
# =============================================================================


class TestUnconfigured:
    """Библиотека без configure_logging()."""

    def test_stdout_holds_only_result(self):
        script = (
            "from src.builder import FormatBuilder\n"
            "from src.core.domain import NumberFieldSpec\n"
            "from src.render import render_number\n"
            "spec = FormatBuilder().build_from_locale("
            "'US', 'Currency', NumberFieldSpec.auto_size())\n"
            "print(render_number('-1000000.00', spec))\n"
        )

        result = subprocess.run(
            [sys.executable, "-c", script],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stdout == "$ -1,000,000.00\n"
        assert result.stderr == ""

    def test_nothing_printed_in_process(self, capsys):
        render_us_currency("-5")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


# =============================================================================
# CONFIGURED
# =============================================================================


class TestConfigureLogging:
    """Тесты configure_logging()."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_level_from_verbosity(self, verbosity, level):
        assert level_from_verbosity(verbosity) == level

    def test_json_events_to_stderr(self, capsys):
        configure_logging(json_mode=True, verbosity=2)

        assert render_us_currency("-5") == "$ -5"

        captured = capsys.readouterr()
        records = [json.loads(line) for line in captured.err.strip().splitlines()]
        rendered = [record for record in records if record["event"] == "number_rendered"]
        assert captured.out == ""
        assert rendered[0]["level"] == "debug"
        assert rendered[0]["sign"] == "Negative"
        assert "timestamp" in rendered[0]

    def test_debug_filtered_at_default_verbosity(self, capsys):
        configure_logging(json_mode=True)

        render_us_currency("-5")

        assert capsys.readouterr().err == ""

    def test_reconfigure_replaces_handler(self):
        configure_logging(verbosity=2)
        configure_logging(verbosity=1)

        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        assert len(library_logger.handlers) == 1
        assert library_logger.level == logging.INFO
        assert library_logger.propagate is False


# =============================================================================
# LIBRARY EVENTS
# =============================================================================


class TestLibraryEvents:
    """Debug-события сборки и рендеринга."""

    def test_build_and_render_events(self):
        with capture_logs() as logs:
            render_us_currency(-5)

        events = [entry["event"] for entry in logs]
        assert "locale_symbols_resolved" in events
        assert "number_format_assembled" in events
        assert "format_built_from_locale" in events
        assert "number_rendered" in events

    def test_ignored_relative_position_logged(self):
        spec = FormatBuilder().build_simple(".", ",", "$", True, -1, "Right")
        spec = spec.with_symbols(
            spec.symbols.with_currency(
                spec.symbols.currency_symbol.model_copy(
                    update={"leading_placement": NumberFieldPlacement.OUTSIDE}
                )
            )
        )

        with capture_logs() as logs:
            assert render_number(-1, spec) == "$-1"

        ignored = [entry for entry in logs if entry["event"] == "currency_relative_position_ignored"]
        assert ignored[0]["side"] == "leading"
