from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from tree_sitter import Node

from pythcheck.core.parser import SyntaxTree, node_position
from pythcheck.models import Position


class ParameterKind(StrEnum):
    POSITIONAL_ONLY = "positional-only"
    POSITIONAL = "positional"
    KEYWORD_ONLY = "keyword-only"
    VAR_POSITIONAL = "var-positional"
    VAR_KEYWORD = "var-keyword"


@dataclass(frozen=True)
class ParameterNode:
    name: str
    kind: ParameterKind
    position: Position
    annotation: str | None = None
    has_default: bool = False


@dataclass(frozen=True)
class FunctionNode:
    path: Path
    name: str
    qualname: str
    position: Position
    parameters: tuple[ParameterNode, ...]
    return_annotation: str | None
    separators: tuple[str, ...] = ()
    is_async: bool = False


def extract(tree: SyntaxTree) -> list[FunctionNode]:
    """Collect every function definition in pre-order, outer before nested.

    Lambdas are skipped along with everything inside them.
    """
    functions: list[FunctionNode] = []
    # (node, enclosing qualname parts)
    stack: list[tuple[Node, tuple[str, ...]]] = [(tree.root, ())]

    while stack:
        node, scope = stack.pop()

        match node.type:
            case "function_definition":
                function = _function_from_node(tree, node, scope)
                functions.append(function)
                child_scope = (*scope, function.name, "<locals>")
            case "class_definition":
                name_node = node.child_by_field_name("name")
                class_name = tree.text(name_node) if name_node is not None else "<class>"
                child_scope = (*scope, class_name)
            case "lambda":
                continue
            case _:
                child_scope = scope

        stack.extend((child, child_scope) for child in reversed(node.named_children))

    return functions


def _function_from_node(tree: SyntaxTree, node: Node, scope: tuple[str, ...]) -> FunctionNode:
    name_node = node.child_by_field_name("name")
    name = tree.text(name_node) if name_node is not None else "<function>"

    params_node = node.child_by_field_name("parameters")
    parameters, separators = _parameters(tree, params_node) if params_node is not None else ((), ())

    return_node = node.child_by_field_name("return_type")

    return FunctionNode(
        path=tree.path,
        name=name,
        qualname=".".join((*scope, name)),
        position=node_position(node),
        parameters=parameters,
        return_annotation=tree.text(return_node) if return_node is not None else None,
        separators=separators,
        is_async=any(child.type == "async" for child in node.children),
    )


def _parameters(tree: SyntaxTree, params_node: Node) -> tuple[tuple[ParameterNode, ...], tuple[str, ...]]:
    parameters: list[ParameterNode] = []
    separators: list[str] = []
    kind = ParameterKind.POSITIONAL

    for child in params_node.named_children:
        match child.type:
            case "identifier":
                parameters.append(ParameterNode(tree.text(child), kind, node_position(child)))
            case "default_parameter":
                parameters.append(
                    ParameterNode(_field_text(tree, child, "name"), kind, node_position(child), has_default=True)
                )
            case "typed_default_parameter":
                parameters.append(
                    ParameterNode(
                        _field_text(tree, child, "name"),
                        kind,
                        node_position(child),
                        annotation=_field_text(tree, child, "type"),
                        has_default=True,
                    )
                )
            case "typed_parameter":
                target = child.named_children[0]
                splat_kind = _splat_kind(target)
                if splat_kind is ParameterKind.VAR_POSITIONAL:
                    kind = ParameterKind.KEYWORD_ONLY
                parameters.append(
                    ParameterNode(
                        tree.text(target).lstrip("*"),
                        splat_kind or kind,
                        node_position(child),
                        annotation=_field_text(tree, child, "type"),
                    )
                )
            case "list_splat_pattern":
                kind = ParameterKind.KEYWORD_ONLY
                parameters.append(
                    ParameterNode(tree.text(child).lstrip("*"), ParameterKind.VAR_POSITIONAL, node_position(child))
                )
            case "dictionary_splat_pattern":
                parameters.append(
                    ParameterNode(tree.text(child).lstrip("*"), ParameterKind.VAR_KEYWORD, node_position(child))
                )
            case "keyword_separator":
                separators.append("*")
                kind = ParameterKind.KEYWORD_ONLY
            case "positional_separator":
                separators.append("/")
                parameters = [
                    ParameterNode(p.name, ParameterKind.POSITIONAL_ONLY, p.position, p.annotation, p.has_default)
                    if p.kind is ParameterKind.POSITIONAL
                    else p
                    for p in parameters
                ]
            case _:
                continue

    return tuple(parameters), tuple(separators)


def _splat_kind(node: Node) -> ParameterKind | None:
    match node.type:
        case "list_splat_pattern":
            return ParameterKind.VAR_POSITIONAL
        case "dictionary_splat_pattern":
            return ParameterKind.VAR_KEYWORD
        case _:
            return None


def _field_text(tree: SyntaxTree, node: Node, field: str) -> str:
    child = node.child_by_field_name(field)
    return tree.text(child) if child is not None else ""
