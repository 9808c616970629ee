from pythcheck.core.aggregate import ReportCollector, aggregate, merge
from pythcheck.core.check import check_file, check_path, check_source, read_source, run_check
from pythcheck.core.classify import classify
from pythcheck.core.discovery import discover
from pythcheck.core.extract import FunctionNode, ParameterKind, ParameterNode, extract
from pythcheck.core.parser import SyntaxTree, parse

__all__ = [
    "FunctionNode",
    "ParameterKind",
    "ParameterNode",
    "ReportCollector",
    "SyntaxTree",
    "aggregate",
    "check_file",
    "check_path",
    "check_source",
    "classify",
    "discover",
    "extract",
    "merge",
    "parse",
    "read_source",
    "run_check",
]
