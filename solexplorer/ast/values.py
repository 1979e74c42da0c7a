"""
Value Reconstructor

Renders initializer and constant expressions back into source-like text.
This is a bounded pretty-printer for the expressions that show up in
initializer positions, not an evaluator: nothing is folded or computed.
"""

from typing import Any, Callable

from solexplorer.ast.nodes import node_type_of
from solexplorer.configs import get_logger

logger = get_logger("ast.values")


def render_value(value: Any) -> str:
    """
    Render an expression subtree or raw JSON scalar as text.

    Never raises. Unsupported expression kinds render as "".

    Args:
        value: Decoded JSON value (expression node dict, string, number, bool, or None)

    Returns:
        Canonical textual value
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, dict):
        node_type = node_type_of(value)
        renderer = _VALUE_RENDERERS.get(node_type)
        if renderer is None:
            logger.debug(f"Unhandled node type in value extraction: {node_type or '<none>'}")
            return ""
        return renderer(value)
    logger.debug(f"Unhandled value type: {type(value).__name__}")
    return ""


def _render_literal(node: dict) -> str:
    value = node.get("value")
    if value is not None:
        return render_value(value)
    hex_value = node.get("hexValue")
    if isinstance(hex_value, str):
        return hex_value
    return ""


def _render_identifier(node: dict) -> str:
    name = node.get("name")
    return name if isinstance(name, str) else ""


def _render_unary(node: dict) -> str:
    operator = _text(node.get("operator"))
    # Operator always leads, including postfix x++
    return f"{operator}{render_value(node.get('subExpression'))}"


def _render_binary(node: dict) -> str:
    left = render_value(node.get("leftExpression"))
    right = render_value(node.get("rightExpression"))
    return f"({left} {_text(node.get('operator'))} {right})"


def _render_function_call(node: dict) -> str:
    callee = node.get("expression")
    if not isinstance(callee, dict):
        return ""

    if node_type_of(callee) == "Identifier":
        function_name = _render_identifier(callee)
    else:
        function_name = render_value(callee)

    arguments = node.get("arguments")
    if not isinstance(arguments, list):
        arguments = []
    args = ", ".join(render_value(arg) for arg in arguments)
    return f"{function_name}({args})"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


_VALUE_RENDERERS: dict[str, Callable[[dict], str]] = {
    "Literal": _render_literal,
    "Identifier": _render_identifier,
    "UnaryOperation": _render_unary,
    "BinaryOperation": _render_binary,
    "FunctionCall": _render_function_call,
}
