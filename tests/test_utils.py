"""Tests for lexico utility modules."""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefix_added(self) -> None:
        from lexico.utils.logger import get_logger

        assert get_logger("mymodule").name == "lexico.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        from lexico.utils.logger import get_logger

        assert get_logger("lexico.lexer.core").name == "lexico.lexer.core"
        assert get_logger("lexico").name == "lexico"

    def test_similar_name_still_prefixed(self) -> None:
        from lexico.utils.logger import get_logger

        assert get_logger("lexicon").name == "lexico.lexicon"


class TestAdvancePosition:
    """Tests for advance_position function."""

    def test_empty_text(self) -> None:
        from lexico.utils.text import advance_position

        assert advance_position("", 4, 2) == (4, 2)

    def test_same_line(self) -> None:
        from lexico.utils.text import advance_position

        assert advance_position("abc", 1, 1) == (1, 4)
        assert advance_position("abc", 2, 5) == (2, 8)

    def test_newlines(self) -> None:
        from lexico.utils.text import advance_position

        assert advance_position("\n", 1, 9) == (2, 1)
        assert advance_position("ab\ncd", 1, 1) == (2, 3)
        assert advance_position("a\n\nbcd", 3, 3) == (5, 4)

    def test_carriage_return_is_a_column(self) -> None:
        from lexico.utils.text import advance_position

        assert advance_position("a\r", 1, 1) == (1, 3)
        assert advance_position("a\r\n", 1, 1) == (2, 1)


class TestVisibleSnippet:
    """Tests for visible_snippet function."""

    def test_single_character(self) -> None:
        from lexico.utils.text import visible_snippet

        assert visible_snippet("1 @ 2", 2) == "'@'"

    def test_width(self) -> None:
        from lexico.utils.text import visible_snippet

        assert visible_snippet("hello", 1, 3) == "'ell'"
        assert visible_snippet("hello", 3, 10) == "'lo'"

    def test_escapes(self) -> None:
        from lexico.utils.text import visible_snippet

        assert visible_snippet("\n", 0) == "'\\n'"

    def test_end_of_input(self) -> None:
        from lexico.utils.text import visible_snippet

        assert visible_snippet("abc", 3) == "end of input"


class TestLibraryLogging:
    """The package logger only carries a NullHandler."""

    def test_null_handler_installed(self) -> None:
        import logging

        import lexico  # noqa: F401

        handlers = logging.getLogger("lexico").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
        assert all(isinstance(h, logging.NullHandler) for h in handlers)
