"""Unit tests for the tree-sitter parser adapter."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser

from pythcheck.core.parser import SyntaxTree, node_position, parse
from pythcheck.errors import ParseError
from pythcheck.models import Position, SourceFile


class TestParse:
    def test_returns_module_root(self, parse_source: Callable[..., SyntaxTree]) -> None:
        tree = parse_source("def f(x):\n    pass\n")
        assert tree.root.type == "module"
        assert tree.path == Path("module.py")

    def test_empty_source_parses(self, parse_source: Callable[..., SyntaxTree]) -> None:
        tree = parse_source("")
        assert tree.root.type == "module"
        assert tree.root.named_child_count == 0

    def test_text_slices_source(self, parse_source: Callable[..., SyntaxTree]) -> None:
        tree = parse_source("def greet(name): ...\n")
        function = tree.root.named_children[0]
        name = function.child_by_field_name("name")
        assert name is not None
        assert tree.text(name) == "greet"

    def test_non_ascii_text_is_sliced_by_bytes(self, parse_source: Callable[..., SyntaxTree]) -> None:
        tree = parse_source("s = 'é'\ndef grüße(x): ...\n")
        function = tree.root.named_children[1]
        name = function.child_by_field_name("name")
        assert name is not None
        assert tree.text(name) == "grüße"

    def test_invalid_syntax_raises_parse_error(self) -> None:
        source = SourceFile(path=Path("b.py"), text="def broken(:\n    pass\n")
        with pytest.raises(ParseError) as excinfo:
            parse(source)
        assert excinfo.value.path == Path("b.py")
        assert excinfo.value.position.line == 1

    def test_unbalanced_parenthesis_raises_parse_error(self) -> None:
        source = SourceFile(path=Path("b.py"), text="def ok(x: int) -> int:\n    return (x\n\ny = [1, 2\n")
        with pytest.raises(ParseError):
            parse(source)

    @pytest.mark.parametrize("text", ['print "hello"\n', 'exec "x = 1"\n'])
    def test_python2_statements_raise_parse_error(self, text: str) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse(SourceFile(path=Path("legacy.py"), text=text))
        assert excinfo.value.position == Position(line=1, column=1)
        assert excinfo.value.detail == "invalid syntax"

    def test_nested_python2_print_raises_parse_error(self) -> None:
        source = SourceFile(path=Path("legacy.py"), text="def f(x: int) -> None:\n    print x\n")
        with pytest.raises(ParseError) as excinfo:
            parse(source)
        assert excinfo.value.position.line == 2

    @pytest.mark.parametrize("text", ['print("hello")\n', 'exec("x = 1")\n', "print(*args, sep='')\n"])
    def test_print_and_exec_calls_parse(self, text: str, parse_source: Callable[..., SyntaxTree]) -> None:
        assert parse_source(text).root.type == "module"

    def test_agrees_with_raw_parser(self, python_parser: Parser) -> None:
        text = "class A:\n    def m(self, x): return x\n"
        raw = python_parser.parse(text.encode("utf-8"))
        assert not raw.root_node.has_error
        tree = parse(SourceFile(path=Path("a.py"), text=text))
        assert tree.root.type == raw.root_node.type


def test_node_position_is_one_based(parse_source: Callable[..., SyntaxTree]) -> None:
    tree = parse_source("\n\n    \ndef f(): ...\n")
    function = tree.root.named_children[0]
    assert node_position(function) == Position(line=4, column=1)
