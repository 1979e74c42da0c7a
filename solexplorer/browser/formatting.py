"""
Formatting Helpers

Render contracts and their declarations as Rich-markup text for the
terminal browser. Pure functions, no Textual imports.
"""

from typing import Union

from rich.markup import escape

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

Member = Union[Import, Variable, Function, Event, Modifier, Struct, Enum]

# Section key -> display title, in display order
SECTIONS: dict[str, str] = {
    "imports": "Imports",
    "constructor": "Constructor",
    "variables": "Variables",
    "mappings": "Mappings",
    "functions": "Functions",
    "events": "Events",
    "modifiers": "Modifiers",
    "structs": "Structs",
    "enums": "Enums",
}


def format_parameters(parameters: tuple[Parameter, ...]) -> str:
    """``(address owner, uint256 amount)`` style parameter list."""
    parts = []
    for param in parameters:
        words = [param.type]
        if param.indexed:
            words.append("indexed")
        if param.name:
            words.append(param.name)
        parts.append(" ".join(w for w in words if w))
    return f"({', '.join(parts)})"


def function_label(function: Function) -> str:
    """Name for list display; unnamed functions show their kind."""
    name = function.name or function.kind
    return f"{name}{format_parameters(function.parameters)}"


def member_label(member: Member) -> str:
    """One-line label for a member in the browser list."""
    if isinstance(member, Function):
        return function_label(member)
    if isinstance(member, Variable):
        return f"{member.type} {member.name}".strip()
    if isinstance(member, (Event, Modifier)):
        return f"{member.name}{format_parameters(member.parameters)}"
    if isinstance(member, Import):
        return member.file or member.absolute_path
    return member.name


def section_members(contract: Contract, section: str) -> list[Member]:
    """Members of one section, in declaration order."""
    if section == "constructor":
        return [contract.constructor] if contract.constructor is not None else []
    return list(getattr(contract, section, ()))


def contract_sections(contract: Contract) -> list[tuple[str, list[Member]]]:
    """Non-empty sections of a contract as (section key, members) pairs."""
    sections = []
    for key in SECTIONS:
        members = section_members(contract, key)
        if members:
            sections.append((key, members))
    return sections


def format_contract_summary(contract: Contract) -> str:
    """Header block for a contract: pragma, inheritance, member counts."""
    lines = [f"[bold]{escape(contract.name)}[/bold]"]
    if contract.pragma:
        lines.append(f"[dim]{escape(contract.pragma)}[/dim]")

    if contract.inherits:
        lines.append(f"[yellow]Inherits:[/yellow] {escape(', '.join(contract.inherits))}")
    else:
        lines.append("[yellow]No inheritance[/yellow]")

    lines.append("")
    if contract.constructor is not None:
        lines.append(f"[dim]constructor:[/dim] {escape(function_label(contract.constructor))}")
    for key, count in contract.member_counts().items():
        if count:
            lines.append(f"[dim]{key}:[/dim] {count}")
    return "\n".join(lines)


def format_function(function: Function) -> str:
    lines = [f"[green]{function.kind.capitalize()}:[/green] {escape(function.name or function.kind)}"]
    if function.visibility:
        lines.append(f"[green]Visibility:[/green] {function.visibility}")
    if function.state_mutability:
        lines.append(f"[green]State mutability:[/green] {function.state_mutability}")

    lines.extend(_parameter_block("Inputs", function.parameters))
    lines.extend(_parameter_block("Outputs", function.return_parameters))

    if function.modifiers:
        lines.append(f"[yellow]Modifiers:[/yellow] {escape(', '.join(function.modifiers))}")
    if function.overrides:
        lines.append(f"[yellow]Overrides:[/yellow] {escape(', '.join(function.overrides))}")
    if function.base_functions:
        ids = ", ".join(str(i) for i in function.base_functions)
        lines.append(f"[yellow]Base functions:[/yellow] {ids}")
    return "\n".join(lines)


def format_variable(variable: Variable) -> str:
    lines = [
        f"[green]Variable:[/green] {escape(variable.name)}",
        f"[green]Type:[/green] {escape(variable.type)}",
    ]
    qualifiers = {
        "Visibility": variable.visibility,
        "Storage": variable.storage_location,
        "Mutability": variable.mutability,
        "Selector": variable.function_selector,
    }
    for label, value in qualifiers.items():
        if value:
            lines.append(f"[green]{label}:[/green] {escape(value)}")
    if variable.constant:
        lines.append("[green]Constant:[/green] yes")
    if variable.value:
        lines.append(f"[green]Value:[/green] {escape(variable.value)}")
    return "\n".join(lines)


def format_event(event: Event) -> str:
    lines = [f"[green]Event:[/green] {escape(event.name)}"]
    lines.extend(_parameter_block("Parameters", event.parameters))
    return "\n".join(lines)


def format_modifier(modifier: Modifier) -> str:
    lines = [f"[green]Modifier:[/green] {escape(modifier.name)}"]
    lines.extend(_parameter_block("Parameters", modifier.parameters))
    return "\n".join(lines)


def format_struct(struct: Struct) -> str:
    lines = [f"[green]Struct:[/green] {escape(struct.name)}", "[yellow]Members:[/yellow]"]
    for member in struct.members:
        lines.append(f"  - {escape(member.name)}: {escape(member.type)}")
    return "\n".join(lines)


def format_enum(enum: Enum) -> str:
    lines = [f"[green]Enum:[/green] {escape(enum.name)}", "[yellow]Values:[/yellow]"]
    lines.extend(f"  - {escape(value)}" for value in enum.values)
    return "\n".join(lines)


def format_import(imp: Import) -> str:
    lines = [f"[green]Import:[/green] {escape(imp.file)}"]
    if imp.absolute_path:
        lines.append(f"[green]Path:[/green] {escape(imp.absolute_path)}")
    if imp.alias:
        lines.append(f"[green]Alias:[/green] {escape(imp.alias)}")
    return "\n".join(lines)


def format_member(member: Member) -> str:
    """Detail text for any member kind."""
    if isinstance(member, Function):
        return format_function(member)
    if isinstance(member, Variable):
        return format_variable(member)
    if isinstance(member, Event):
        return format_event(member)
    if isinstance(member, Modifier):
        return format_modifier(member)
    if isinstance(member, Struct):
        return format_struct(member)
    if isinstance(member, Enum):
        return format_enum(member)
    return format_import(member)


def _parameter_block(title: str, parameters: tuple[Parameter, ...]) -> list[str]:
    if not parameters:
        return []
    lines = [f"[yellow]{title}:[/yellow]"]
    for param in parameters:
        suffix = " [dim](indexed)[/dim]" if param.indexed else ""
        lines.append(f"  - {escape(param.name)}: {escape(param.type)}{suffix}")
    return lines
