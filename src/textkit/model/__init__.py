from textkit.model.diagnostic import Diagnostic, Severity
from textkit.model.rule import Rule, RuleSet
from textkit.model.value import ListValue, MapValue, Opaque, Scalar, Value, classify

__all__ = [
    "Diagnostic",
    "Severity",
    "Rule",
    "RuleSet",
    "Scalar",
    "ListValue",
    "MapValue",
    "Opaque",
    "Value",
    "classify",
]
