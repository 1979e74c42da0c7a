"""
Data Models for Contract Extraction

Structured, immutable representations of the declarations found in one
compiled Solidity source unit. Built once by the extractor, never mutated.
"""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Parameter:
    """Represents a function, modifier, or event parameter."""

    name: str
    type: str
    indexed: bool = False  # Only meaningful for event parameters


@dataclass(frozen=True)
class Import:
    """Represents an import directive."""

    absolute_path: str
    file: str
    alias: str = ""


@dataclass(frozen=True)
class Variable:
    """Represents a variable declaration (state variable or struct member)."""

    name: str
    type: str
    visibility: str = ""
    state_variable: bool = False
    storage_location: str = ""
    constant: bool = False
    mutability: str = ""  # mutable, immutable, constant
    function_selector: str = ""  # Set for public state variables (getter selector)
    value: str = ""  # Rendered initializer, empty when absent


@dataclass(frozen=True)
class Function:
    """Represents a function definition, including constructor/fallback/receive."""

    name: str
    kind: str = "function"  # function, constructor, fallback, receive
    visibility: str = ""
    state_mutability: str = ""
    parameters: tuple[Parameter, ...] = ()
    return_parameters: tuple[Parameter, ...] = ()
    modifiers: tuple[str, ...] = ()  # Application order
    base_functions: tuple[int, ...] = ()  # AST ids of overridden functions
    overrides: tuple[str, ...] = ()  # Contracts named in override(...)

    @property
    def is_constructor(self) -> bool:
        return self.kind == "constructor"


@dataclass(frozen=True)
class Event:
    """Represents an event definition."""

    name: str
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class Modifier:
    """Represents a modifier definition."""

    name: str
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class Struct:
    """Represents a struct definition."""

    name: str
    members: tuple[Variable, ...] = ()


@dataclass(frozen=True)
class Enum:
    """Represents an enum definition."""

    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class Contract:
    """Complete declaration model for one compiled contract."""

    name: str
    pragma: str = ""
    imports: tuple[Import, ...] = ()
    inherits: tuple[str, ...] = ()  # Declaration order, duplicates kept
    constructor: Optional[Function] = None
    variables: tuple[Variable, ...] = ()
    mappings: tuple[Variable, ...] = ()
    functions: tuple[Function, ...] = ()
    events: tuple[Event, ...] = ()
    modifiers: tuple[Modifier, ...] = ()
    structs: tuple[Struct, ...] = ()
    enums: tuple[Enum, ...] = ()

    def member_counts(self) -> dict[str, int]:
        """Count of declarations per collection, in display order."""
        return {
            "imports": len(self.imports),
            "variables": len(self.variables),
            "mappings": len(self.mappings),
            "functions": len(self.functions),
            "events": len(self.events),
            "modifiers": len(self.modifiers),
            "structs": len(self.structs),
            "enums": len(self.enums),
        }

    def to_dict(self) -> dict:
        """Plain-dict view with lists in place of tuples."""
        return asdict(self, dict_factory=_list_dict_factory)


def _list_dict_factory(items: list[tuple[str, object]]) -> dict:
    return {key: list(value) if isinstance(value, tuple) else value for key, value in items}
