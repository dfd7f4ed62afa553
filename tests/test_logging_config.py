"""Tests for logging context handling."""

import json
import logging

from grocerylist.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    clear_context,
    get_logger,
    recipe_id_ctx,
    request_id_ctx,
    set_context,
)


def make_record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("grocerylist.test", logging.INFO, __file__, 1, message, None, None)


class TestLoggingContext:
    """Tests for LoggingContext and the context helpers."""

    def test_sets_and_resets(self):
        """Test values are visible inside the block and restored after."""
        assert recipe_id_ctx.get() is None

        with LoggingContext(recipe_id="pasta"):
            assert recipe_id_ctx.get() == "pasta"
            with LoggingContext(recipe_id="soup"):
                assert recipe_id_ctx.get() == "soup"
            assert recipe_id_ctx.get() == "pasta"

        assert recipe_id_ctx.get() is None

    def test_none_leaves_value_alone(self):
        """Test unset arguments do not overwrite outer context."""
        with LoggingContext(request_id="req-1"):
            with LoggingContext(recipe_id="pasta"):
                assert request_id_ctx.get() == "req-1"

    def test_set_and_clear(self):
        """Test set_context and clear_context."""
        set_context(request_id="req-2", recipe_id="soup")
        assert (request_id_ctx.get(), recipe_id_ctx.get()) == ("req-2", "soup")

        clear_context()
        assert (request_id_ctx.get(), recipe_id_ctx.get()) == (None, None)


class TestFormatters:
    """Tests for the log formatters."""

    def test_contextual_formatter_includes_recipe(self):
        """Test the text formatter shows the current recipe."""
        with LoggingContext(recipe_id="pasta"):
            line = ContextualFormatter().format(make_record("added"))

        assert "[recipe=pasta]" in line
        assert line.endswith("| added")

    def test_contextual_formatter_without_context(self):
        """Test no context block is printed when nothing is set."""
        line = ContextualFormatter().format(make_record())
        assert "[" not in line

    def test_json_formatter(self):
        """Test the JSON formatter output fields."""
        with LoggingContext(request_id="req-3", recipe_id="soup"):
            data = json.loads(StructuredJsonFormatter().format(make_record("saved")))

        assert data["message"] == "saved"
        assert data["level"] == "INFO"
        assert data["request_id"] == "req-3"
        assert data["recipe_id"] == "soup"
        assert data["location"]["line"] == 1


class TestContextLogger:
    """Tests for ContextLogger."""

    def test_adds_context_to_extra(self):
        """Test context variables are passed as record extras."""
        logger = get_logger("grocerylist.test")

        with LoggingContext(recipe_id="pasta"):
            _, kwargs = logger.process("msg", {})

        assert kwargs["extra"] == {"recipe_id": "pasta"}
