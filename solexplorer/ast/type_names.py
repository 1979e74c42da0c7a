"""
Type Renderer

Turns a type-name subtree into the canonical Solidity type string,
e.g. ``mapping(address => uint256)`` or ``bytes32[4]``.
"""

from typing import Any, Callable

from solexplorer.ast.nodes import node_type_of
from solexplorer.ast.values import render_value


def render_type(node: Any) -> str:
    """
    Render a type-name node as a type string.

    Never raises: null input and unrecognized kinds (function types,
    anything newer than this renderer) render as "".

    Args:
        node: Decoded ``typeName`` subtree, or None

    Returns:
        Canonical type string
    """
    renderer = _TYPE_RENDERERS.get(node_type_of(node))
    if renderer is None:
        return ""
    return renderer(node)


def _render_elementary(node: dict) -> str:
    return _text(node.get("name"))


def _render_user_defined(node: dict) -> str:
    # Resolved type string first, then the written name, then the path node
    descriptions = node.get("typeDescriptions")
    if isinstance(descriptions, dict):
        type_string = _text(descriptions.get("typeString"))
        if type_string:
            return type_string

    name = _text(node.get("name"))
    if name:
        return name

    path_node = node.get("pathNode")
    if isinstance(path_node, dict):
        return _text(path_node.get("name"))
    return ""


def _render_mapping(node: dict) -> str:
    key_type = render_type(node.get("keyType"))
    value_type = render_type(node.get("valueType"))
    return f"mapping({key_type} => {value_type})"


def _render_array(node: dict) -> str:
    base_type = render_type(node.get("baseType"))
    length = render_value(node.get("length"))
    return f"{base_type}[{length}]"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


_TYPE_RENDERERS: dict[str, Callable[[dict], str]] = {
    "ElementaryTypeName": _render_elementary,
    "UserDefinedTypeName": _render_user_defined,
    "Mapping": _render_mapping,
    "ArrayTypeName": _render_array,
}
