from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from pythcheck.errors import ParseError
from pythcheck.models import Position, SourceFile


@dataclass(frozen=True)
class SyntaxTree:
    path: Path
    source_bytes: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        return self.source_bytes[node.start_byte : node.end_byte].decode("utf-8")


def node_position(node: Node) -> Position:
    row, column = node.start_point
    return Position(line=row + 1, column=column + 1)


def _first_error(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node in pre-order, or None."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        stack.extend(child for child in reversed(current.children) if child.has_error or child.is_missing)
    return None


PYTHON2_ONLY_STATEMENTS = frozenset({"print_statement", "exec_statement"})


def _first_python2_statement(node: Node) -> Node | None:
    """Return the first Python 2 statement the grammar still accepts, or None."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in PYTHON2_ONLY_STATEMENTS:
            return current
        stack.extend(reversed(current.named_children))
    return None


def parse(source: SourceFile) -> SyntaxTree:
    """Parse Python source into a concrete syntax tree.

    Raises ParseError when tree-sitter had to recover from invalid syntax or
    accepted a Python 2 print or exec statement.
    """
    source_bytes = source.text.encode("utf-8")
    tree = get_parser("python").parse(source_bytes)

    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        detail = f"missing '{bad.type}'" if bad.is_missing else "invalid syntax"
        raise ParseError(source.path, node_position(bad), detail)

    legacy = _first_python2_statement(root)
    if legacy is not None:
        raise ParseError(source.path, node_position(legacy), "invalid syntax")

    return SyntaxTree(path=source.path, source_bytes=source_bytes, tree=tree)
