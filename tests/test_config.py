"""Tests for the cached compiler and its logging."""

import logging

import pytest
from lark import Tree

import a1111_prompt_ir
from a1111_prompt_ir import Compiler, InvalidAst, compile_prompt, get_compiler, reset_compiler
from conftest import plain, positive, start


@pytest.fixture(autouse=True)
def fresh_compiler():
    reset_compiler()
    yield
    reset_compiler()


class TestCachedCompiler:
    def test_same_instance(self):
        assert get_compiler() is get_compiler()

    def test_reset_creates_new_instance(self):
        first = get_compiler()
        reset_compiler()
        assert get_compiler() is not first

    def test_cached_compiler_is_not_debug(self):
        assert get_compiler().debug is False

    def test_debug_does_not_replace_cache(self):
        cached = get_compiler()
        compile_prompt(plain("a"), debug=True)
        assert get_compiler() is cached

    def test_public_exports(self):
        for name in a1111_prompt_ir.__all__:
            assert hasattr(a1111_prompt_ir, name)


class TestLogging:
    def test_debug_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="A1111PromptIR"):
            Compiler(debug=True).compile(start(plain("a"), positive(plain("b"))))
        assert "2 item(s): [token, positive]" in caplog.text

    def test_quiet_by_default(self, caplog):
        with caplog.at_level(logging.INFO, logger="A1111PromptIR"):
            Compiler().compile(plain("a"))
        assert caplog.text == ""

    def test_failure_is_logged_and_raised(self, caplog):
        with caplog.at_level(logging.WARNING, logger="A1111PromptIR"):
            with pytest.raises(InvalidAst):
                Compiler().compile(Tree("unknown_kind", []))
        assert "Compilation aborted: Invalid AST: unknown_kind" in caplog.text
