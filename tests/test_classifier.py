"""Tests for break classification."""

from checkbreak.engine._types import Diff, File
from checkbreak.engine.classifier import find_breaks
from checkbreak.engine.differ import (
    ADDING_PARAMETER_WITHOUT_DEFAULT,
    DELETION_OF_DEFAULT_PARAMETER,
    DELETION_OF_METHOD,
    DELETION_OF_PARAMETER,
)


def _file(
    removed: list[str],
    added: list[str] | None = None,
    name: str = "api.go",
    type_tag: str = "go",
    status: str = "M",
) -> File:
    return File(
        name=name,
        status=status,
        type_tag=type_tag,
        diff=Diff(removed=tuple(removed), added=tuple(added or [])),
    )


class TestFindBreaks:
    def test_deleted_method(self) -> None:
        result = find_breaks(_file(["func OldName(a int) {"]))
        assert len(result) == 1
        m = result[0]
        assert m.before == "func OldName(a int) {"
        assert m.after == ""
        assert m.common_factor == "func OldName("
        assert m.explanation == DELETION_OF_METHOD

    def test_parameter_removed(self) -> None:
        result = find_breaks(_file(["func F(a int, b string) {"], ["func F(a int) {"]))
        assert len(result) == 1
        assert result[0].after == "func F(a int) {"
        assert result[0].explanation == DELETION_OF_PARAMETER

    def test_safe_addition_not_reported(self) -> None:
        assert find_breaks(_file(["func F(a int) {"], ["func F(a int, b=0) {"])) == []

    def test_unsafe_addition(self) -> None:
        result = find_breaks(_file(["func F(a int) {"], ["func F(a int, b int) {"]))
        assert [m.explanation for m in result] == [ADDING_PARAMETER_WITHOUT_DEFAULT]

    def test_receiver_is_part_of_common_factor(self) -> None:
        removed = "func (s *Server) Handle(r Request, timeout int) error {"
        added = ["func (c *Client) Handle(r Request) error {"]
        result = find_breaks(_file([removed], added))
        assert result[0].common_factor == "func (s *Server) Handle("
        # Another receiver is another method
        assert result[0].explanation == DELETION_OF_METHOD

    def test_unsupported_type(self) -> None:
        assert find_breaks(_file(["def foo(a):"], type_tag="py", name="foo.py")) == []

    def test_removed_line_not_matching_is_skipped(self) -> None:
        assert find_breaks(_file(["return Add(a, b)"])) == []

    def test_order_follows_removed_lines(self) -> None:
        result = find_breaks(
            _file(
                ["func B(x int) {", "func A(x int) {", "func C(x int, y int) {"],
                ["func C(x int) {"],
            )
        )
        assert [m.common_factor for m in result] == ["func B(", "func A(", "func C("]
        assert [m.explanation for m in result] == [
            DELETION_OF_METHOD,
            DELETION_OF_METHOD,
            DELETION_OF_PARAMETER,
        ]


class TestRelocation:
    def test_moved_declaration_not_reported(self) -> None:
        line = "func Add(a int, b int) int {"
        assert find_breaks(_file([line], ["func Other() {", line])) == []

    def test_same_shape_counts_as_move(self) -> None:
        """Same word count and length with a shared header: treated as a move."""
        assert find_breaks(_file(["func Add(a int) int {"], ["func Add(b int) int {"])) == []

    def test_move_wins_over_earlier_candidate(self) -> None:
        line = "func Add(a int, b int) int {"
        added = ["func Add(a int) int {", line]
        assert find_breaks(_file([line], added)) == []


class TestLastMatchWins:
    def test_last_matching_added_line_is_paired(self) -> None:
        added = ["func Add(a int) int {", "func Add(a int, b int, c int) int {"]
        result = find_breaks(_file(["func Add(a int, b int) int {"], added))
        assert len(result) == 1
        assert result[0].after == "func Add(a int, b int, c int) int {"
        assert result[0].explanation == ADDING_PARAMETER_WITHOUT_DEFAULT

    def test_header_must_be_a_prefix(self) -> None:
        """``func AddAll(`` does not start with ``func Add(``."""
        result = find_breaks(_file(["func Add(a int) {"], ["func AddAll(a int, b int) {"]))
        assert result[0].explanation == DELETION_OF_METHOD


class TestOtherLanguages:
    def test_php_default_parameter_removed(self) -> None:
        f = _file(
            ["public function send($to, $body = '')"],
            ["public function send($to)"],
            name="Mailer.php",
            type_tag="php",
        )
        result = find_breaks(f)
        assert [m.explanation for m in result] == [DELETION_OF_DEFAULT_PARAMETER]
        assert result[0].common_factor == "public function send("

    def test_js_assigned_function(self) -> None:
        f = _file(
            ["Widget.render = function (el, props) {"],
            ["Widget.render = function (el) {"],
            name="widget.js",
            type_tag="js",
        )
        result = find_breaks(f)
        assert [m.explanation for m in result] == [DELETION_OF_PARAMETER]

    def test_java_method_deleted(self) -> None:
        f = _file(
            ["public static int add(int a, int b) {"],
            name="Calc.java",
            type_tag="java",
        )
        assert [m.explanation for m in find_breaks(f)] == [DELETION_OF_METHOD]
