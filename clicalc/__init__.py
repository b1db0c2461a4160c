"""
cli-calc - An interactive expression calculator.

This package turns one line of text into a typed value: a tokenizer,
a recursive descent parser and a tree-walking evaluator for arithmetic,
comparison, logical and bitwise expressions over numbers and booleans.

Usage:
    from clicalc import parse_and_evaluate

    result = parse_and_evaluate("2 ^ 3 ^ 2")  # Number(512.0)
    print(result)                             # 512
"""

# Lazy imports to avoid circular import issues
def __getattr__(name: str):
    if name == "parse_and_evaluate":
        from clicalc.executors import parse_and_evaluate
        return parse_and_evaluate
    if name == "ExpressionExecutor":
        from clicalc.executors import ExpressionExecutor
        return ExpressionExecutor
    if name == "parse":
        from clicalc.parser import parse
        return parse
    if name == "evaluate":
        from clicalc.evaluator import evaluate
        return evaluate
    if name == "ParseError":
        from clicalc.parser import ParseError
        return ParseError
    if name == "EvaluationTypeError":
        from clicalc.evaluator import EvaluationTypeError
        return EvaluationTypeError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ExpressionExecutor",
    "EvaluationTypeError",
    "ParseError",
    "evaluate",
    "parse",
    "parse_and_evaluate",
]

__version__ = "1.0.0"
