from pythcheck.core.extract import FunctionNode, ParameterKind, ParameterNode
from pythcheck.models import Policy, Violation, ViolationKind

EXEMPT_LEADING_PARAMETERS = frozenset({"self", "cls"})


def is_exempt(index: int, parameter: ParameterNode) -> bool:
    """The leading positional ``self``/``cls`` never needs a hint."""
    return (
        index == 0
        and parameter.kind in (ParameterKind.POSITIONAL, ParameterKind.POSITIONAL_ONLY)
        and parameter.name in EXEMPT_LEADING_PARAMETERS
    )


def classify(function: FunctionNode, policy: Policy) -> list[Violation]:
    """Return the missing-annotation findings for one function.

    Parameters are reported in declaration order, the return slot last.
    Default values do not count as annotations; ``-> None`` does.
    """
    violations: list[Violation] = []

    for index, parameter in enumerate(function.parameters):
        if parameter.annotation is not None or is_exempt(index, parameter):
            continue
        violations.append(
            Violation(
                path=function.path,
                function=function.qualname,
                function_position=function.position,
                position=parameter.position,
                kind=ViolationKind.MISSING_PARAMETER_HINT,
                parameter=parameter.name,
            )
        )

    if not policy.ignore_return and function.return_annotation is None:
        violations.append(
            Violation(
                path=function.path,
                function=function.qualname,
                function_position=function.position,
                position=function.position,
                kind=ViolationKind.MISSING_RETURN_HINT,
            )
        )

    return violations
