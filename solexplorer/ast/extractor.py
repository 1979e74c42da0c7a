"""
Contract Extractor

Walks the AST of one compiled source unit and builds the Contract model.

Single pass, no I/O. Node kinds the extractor has no model for are skipped
so newer compiler output still loads; the only hard failure is a document
without any top-level nodes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from solexplorer.ast.models import (
    Contract,
    Enum,
    Event,
    Function,
    Import,
    Modifier,
    Parameter,
    Struct,
    Variable,
)
from solexplorer.ast.nodes import (
    ASTNode,
    ContractDefinition,
    EnumDefinition,
    EventDefinition,
    FunctionDefinition,
    ImportDirective,
    ModifierDefinition,
    ParameterList,
    PragmaDirective,
    StructDefinition,
    VariableDeclaration,
    node_type_of,
    parse_node,
)
from solexplorer.ast.type_names import render_type
from solexplorer.ast.values import render_value
from solexplorer.configs import get_logger
from solexplorer.exceptions import MissingASTError

logger = get_logger("ast.extractor")


@dataclass
class _ContractBuilder:
    """Mutable accumulator; frozen into a Contract once the walk is done."""

    name: str = ""
    pragma: str = ""
    imports: list[Import] = field(default_factory=list)
    inherits: list[str] = field(default_factory=list)
    constructor: Optional[Function] = None
    variables: list[Variable] = field(default_factory=list)
    mappings: list[Variable] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    modifiers: list[Modifier] = field(default_factory=list)
    structs: list[Struct] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    has_definition: bool = False

    def build(self) -> Contract:
        return Contract(
            name=self.name,
            pragma=self.pragma,
            imports=tuple(self.imports),
            inherits=tuple(self.inherits),
            constructor=self.constructor,
            variables=tuple(self.variables),
            mappings=tuple(self.mappings),
            functions=tuple(self.functions),
            events=tuple(self.events),
            modifiers=tuple(self.modifiers),
            structs=tuple(self.structs),
            enums=tuple(self.enums),
        )


def source_unit_nodes(document: Any) -> list[Any]:
    """
    Return the top-level AST node list of a decoded document.

    Accepts compiler artifacts (``{"contractName": ..., "ast": {"nodes": [...]}}``)
    as well as a bare ``SourceUnit`` node. Anything else has no nodes.
    """
    if not isinstance(document, dict):
        return []

    ast = document.get("ast")
    if isinstance(ast, dict):
        nodes = ast.get("nodes")
    elif node_type_of(document) == "SourceUnit":
        nodes = document.get("nodes")
    else:
        nodes = None

    return nodes if isinstance(nodes, list) else []


def extract_contract(document: Any, path: str | Path | None = None) -> Contract:
    """
    Build a Contract from one decoded AST document.

    Args:
        document: Decoded JSON document
        path: Source path, only used for error reporting

    Returns:
        Contract model

    Raises:
        MissingASTError: If the document has no top-level AST nodes
    """
    nodes = source_unit_nodes(document)
    if not nodes:
        raise MissingASTError("No AST found in document", path)

    builder = _ContractBuilder()
    contract_name = document.get("contractName")
    if isinstance(contract_name, str):
        builder.name = contract_name

    for raw in nodes:
        node = _parse(raw)
        if isinstance(node, PragmaDirective):
            builder.pragma = extract_pragma(node)
        elif isinstance(node, ImportDirective):
            builder.imports.append(extract_import(node))
        elif isinstance(node, ContractDefinition):
            if builder.has_definition:
                logger.debug(f"Ignoring additional contract definition: {node.name}")
                continue
            builder.has_definition = True
            if not builder.name:
                builder.name = node.name
            _extract_contract_definition(node, builder)
        else:
            logger.debug(f"Skipping top-level node: {node_type_of(raw) or '<untyped>'}")

    return builder.build()


def _parse(raw: Any) -> Optional[ASTNode]:
    """Parse a raw node, treating a malformed known kind like an unknown one."""
    try:
        return parse_node(raw)
    except ValidationError as e:
        logger.warning(
            f"Skipping malformed {node_type_of(raw)} node "
            f"(id={raw.get('id')}): {e.error_count()} validation error(s)"
        )
        return None


def _extract_contract_definition(node: ContractDefinition, builder: _ContractBuilder) -> None:
    """Collect inheritance and dispatch each member to its extractor."""
    for base in node.base_contracts:
        builder.inherits.append(base.base_name.name)

    for raw in node.nodes:
        member = _parse(raw)
        if isinstance(member, VariableDeclaration):
            variable = extract_variable(member)
            if member.is_mapping:
                builder.mappings.append(variable)
            else:
                builder.variables.append(variable)
        elif isinstance(member, FunctionDefinition):
            function = extract_function(member)
            if function.is_constructor:
                builder.constructor = function
            else:
                builder.functions.append(function)
        elif isinstance(member, EventDefinition):
            builder.events.append(extract_event(member))
        elif isinstance(member, ModifierDefinition):
            builder.modifiers.append(extract_modifier(member))
        elif isinstance(member, StructDefinition):
            builder.structs.append(extract_struct(member))
        elif isinstance(member, EnumDefinition):
            builder.enums.append(extract_enum(member))
        else:
            logger.debug(f"Skipping contract member: {node_type_of(raw) or '<untyped>'}")


# =============================================================================
# Per-kind extractors
# =============================================================================


def extract_pragma(node: PragmaDirective) -> str:
    """``["solidity", "^", "0.8", ".0"]`` becomes ``pragma solidity^0.8.0;``."""
    return f"pragma {''.join(node.literals)};"


def extract_import(node: ImportDirective) -> Import:
    return Import(
        absolute_path=node.absolute_path,
        file=node.file,
        alias=node.alias,
    )


def extract_variable(node: VariableDeclaration) -> Variable:
    """Extract a state variable or struct member declaration."""
    return Variable(
        name=node.name,
        type=render_type(node.type_name),
        visibility=node.visibility,
        state_variable=node.state_variable,
        storage_location=node.storage_location,
        constant=node.constant,
        mutability=node.mutability,
        function_selector=node.function_selector,
        value=render_value(node.value),
    )


def extract_parameter(node: VariableDeclaration) -> Parameter:
    return Parameter(
        name=node.name,
        type=render_type(node.type_name),
        indexed=node.indexed,
    )


def extract_parameters(parameter_list: ParameterList) -> tuple[Parameter, ...]:
    return tuple(extract_parameter(p) for p in parameter_list.parameters)


def extract_function(node: FunctionDefinition) -> Function:
    """
    Extract a function definition.

    Constructors, fallback and receive functions come through here too;
    they are told apart by ``kind`` and usually have an empty name.
    """
    overrides: tuple[str, ...] = ()
    if node.overrides is not None:
        overrides = tuple(ref.name for ref in node.overrides.overrides)

    return Function(
        name=node.name,
        kind=node.kind,
        visibility=node.visibility,
        state_mutability=node.state_mutability,
        parameters=extract_parameters(node.parameters),
        return_parameters=extract_parameters(node.return_parameters),
        modifiers=tuple(m.modifier_name.name for m in node.modifiers),
        base_functions=tuple(node.base_functions),
        overrides=overrides,
    )


def extract_event(node: EventDefinition) -> Event:
    return Event(name=node.name, parameters=extract_parameters(node.parameters))


def extract_modifier(node: ModifierDefinition) -> Modifier:
    return Modifier(name=node.name, parameters=extract_parameters(node.parameters))


def extract_struct(node: StructDefinition) -> Struct:
    # Members are never split into mappings
    return Struct(
        name=node.name,
        members=tuple(extract_variable(member) for member in node.members),
    )


def extract_enum(node: EnumDefinition) -> Enum:
    return Enum(
        name=node.name,
        values=tuple(m.name for m in node.members if m.node_type == "EnumValue"),
    )
