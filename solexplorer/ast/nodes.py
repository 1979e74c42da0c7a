"""
Typed AST Node Kinds

One pydantic model per compiler AST node kind that the extractor reads,
tagged by the node's ``nodeType``. Raw JSON dicts are turned into these
models by ``parse_node``; kinds without a model come back as ``None`` so
callers can skip them.

Only the fields the extractor reads are declared. Everything else in the
compiler output is ignored, and explicit ``null`` values fall back to the
field default.
"""

from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


class ASTNode(BaseModel):
    """Fields common to every node kind."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    NODE_TYPE: ClassVar[str] = ""

    id: Optional[int] = None
    node_type: str = Field(default="", alias="nodeType")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class NamedReference(ASTNode):
    """Any node referenced only by its name (IdentifierPath, Identifier, UserDefinedTypeName)."""

    name: str = ""


# =============================================================================
# Source-unit level
# =============================================================================


class PragmaDirective(ASTNode):
    NODE_TYPE: ClassVar[str] = "PragmaDirective"

    literals: list[str] = Field(default_factory=list)


class ImportDirective(ASTNode):
    NODE_TYPE: ClassVar[str] = "ImportDirective"

    absolute_path: str = Field(default="", alias="absolutePath")
    file: str = ""
    name: str = ""
    unit_alias: str = Field(default="", alias="unitAlias")

    @property
    def alias(self) -> str:
        return self.name or self.unit_alias


class InheritanceSpecifier(ASTNode):
    NODE_TYPE: ClassVar[str] = "InheritanceSpecifier"

    base_name: NamedReference = Field(default_factory=NamedReference, alias="baseName")


class ContractDefinition(ASTNode):
    NODE_TYPE: ClassVar[str] = "ContractDefinition"

    name: str = ""
    base_contracts: list[InheritanceSpecifier] = Field(default_factory=list, alias="baseContracts")
    # Members stay raw; each one is parsed on its own so a malformed member
    # cannot take the rest of the contract down with it.
    nodes: list[Any] = Field(default_factory=list)


# =============================================================================
# Contract members
# =============================================================================


class VariableDeclaration(ASTNode):
    NODE_TYPE: ClassVar[str] = "VariableDeclaration"

    name: str = ""
    visibility: str = ""
    state_variable: bool = Field(default=False, alias="stateVariable")
    storage_location: str = Field(default="", alias="storageLocation")
    constant: bool = False
    mutability: str = ""
    function_selector: str = Field(default="", alias="functionSelector")
    indexed: bool = False
    # Type and initializer subtrees are rendered, never modeled
    type_name: Any = Field(default=None, alias="typeName")
    value: Any = None

    @property
    def is_mapping(self) -> bool:
        return isinstance(self.type_name, dict) and self.type_name.get("nodeType") == "Mapping"


class ParameterList(ASTNode):
    NODE_TYPE: ClassVar[str] = "ParameterList"

    parameters: list[VariableDeclaration] = Field(default_factory=list)


def _coerce_parameter_list(value: Any) -> Any:
    """Accept a bare list of declarations where a ParameterList is expected."""
    if isinstance(value, list):
        return {"nodeType": "ParameterList", "parameters": value}
    return value


ParameterListField = Annotated[ParameterList, BeforeValidator(_coerce_parameter_list)]


class ModifierInvocation(ASTNode):
    NODE_TYPE: ClassVar[str] = "ModifierInvocation"

    modifier_name: NamedReference = Field(default_factory=NamedReference, alias="modifierName")


class OverrideSpecifier(ASTNode):
    NODE_TYPE: ClassVar[str] = "OverrideSpecifier"

    overrides: list[NamedReference] = Field(default_factory=list)


class FunctionDefinition(ASTNode):
    NODE_TYPE: ClassVar[str] = "FunctionDefinition"

    name: str = ""
    kind: str = "function"
    visibility: str = ""
    state_mutability: str = Field(default="", alias="stateMutability")
    parameters: ParameterListField = Field(default_factory=ParameterList)
    return_parameters: ParameterListField = Field(default_factory=ParameterList, alias="returnParameters")
    modifiers: list[ModifierInvocation] = Field(default_factory=list)
    base_functions: list[int] = Field(default_factory=list, alias="baseFunctions")
    overrides: Optional[OverrideSpecifier] = None


class EventDefinition(ASTNode):
    NODE_TYPE: ClassVar[str] = "EventDefinition"

    name: str = ""
    parameters: ParameterListField = Field(default_factory=ParameterList)


class ModifierDefinition(ASTNode):
    NODE_TYPE: ClassVar[str] = "ModifierDefinition"

    name: str = ""
    parameters: ParameterListField = Field(default_factory=ParameterList)


class StructDefinition(ASTNode):
    NODE_TYPE: ClassVar[str] = "StructDefinition"

    name: str = ""
    members: list[VariableDeclaration] = Field(default_factory=list)


class EnumValue(ASTNode):
    NODE_TYPE: ClassVar[str] = "EnumValue"

    node_type: str = Field(default="EnumValue", alias="nodeType")
    name: str = ""


class EnumDefinition(ASTNode):
    NODE_TYPE: ClassVar[str] = "EnumDefinition"

    name: str = ""
    members: list[EnumValue] = Field(default_factory=list)


SourceUnitNode = Union[PragmaDirective, ImportDirective, ContractDefinition]

ContractMemberNode = Union[
    VariableDeclaration,
    FunctionDefinition,
    EventDefinition,
    ModifierDefinition,
    StructDefinition,
    EnumDefinition,
]

NODE_MODELS: dict[str, type[ASTNode]] = {
    model.NODE_TYPE: model
    for model in (
        PragmaDirective,
        ImportDirective,
        ContractDefinition,
        VariableDeclaration,
        FunctionDefinition,
        EventDefinition,
        ModifierDefinition,
        StructDefinition,
        EnumDefinition,
    )
}


def node_type_of(raw: Any) -> str:
    """Return the ``nodeType`` tag of a raw node, or "" for anything else."""
    if isinstance(raw, dict):
        tag = raw.get("nodeType")
        if isinstance(tag, str):
            return tag
    return ""


def parse_node(raw: Any) -> Optional[ASTNode]:
    """
    Build the typed model for a raw AST node.

    Args:
        raw: One decoded JSON value from a ``nodes`` list

    Returns:
        The typed node, or None when the kind has no model

    Raises:
        pydantic.ValidationError: If a known kind has fields of the wrong shape
    """
    model = NODE_MODELS.get(node_type_of(raw))
    if model is None:
        return None
    return model.model_validate(raw)
