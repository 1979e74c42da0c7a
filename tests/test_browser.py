"""
Tests for Browser Formatting and the Command Line

The Textual widgets are thin; the text they show comes from the pure
formatting helpers tested here.
"""

from pathlib import Path

from solexplorer.ast.extractor import extract_contract
from solexplorer.ast.models import Enum, Event, Function, Import, Parameter, Struct, Variable
from solexplorer.browser.formatting import (
    SECTIONS,
    contract_sections,
    format_contract_summary,
    format_event,
    format_function,
    format_member,
    format_parameters,
    format_variable,
    function_label,
    member_label,
    section_members,
)
from solexplorer.browser.terminal.widgets.stats_panel import registry_totals
from solexplorer.ast.registry import build_registry
from solexplorer.cli import build_parser, format_listing, main


# =============================================================================
# Formatting
# =============================================================================


class TestFormatting:
    """Test text rendering of contracts and members."""

    def test_format_parameters(self):
        params = (Parameter("from", "address", True), Parameter("", "uint256"))
        assert format_parameters(params) == "(address indexed from, uint256)"
        assert format_parameters(()) == "()"

    def test_function_label_uses_kind_when_unnamed(self):
        assert function_label(Function(name="", kind="receive")) == "receive()"
        fn = Function(name="transfer", parameters=(Parameter("to", "address"),))
        assert function_label(fn) == "transfer(address to)"

    def test_member_labels(self):
        assert member_label(Variable("owner", "address")) == "address owner"
        assert member_label(Event("Ping", (Parameter("id", "uint8"),))) == "Ping(uint8 id)"
        assert member_label(Import("/abs/Ownable.sol", "./Ownable.sol")) == "./Ownable.sol"
        assert member_label(Enum("Phase", ("A",))) == "Phase"

    def test_sections_skip_empty(self, token_document):
        contract = extract_contract(token_document)
        keys = [key for key, _ in contract_sections(contract)]
        assert keys == list(SECTIONS)
        assert section_members(contract, "constructor") == [contract.constructor]

        bare = extract_contract({"ast": {"nodes": [{"nodeType": "ContractDefinition", "name": "Bare"}]}})
        assert contract_sections(bare) == []
        assert section_members(bare, "constructor") == []

    def test_contract_summary(self, token_document):
        summary = format_contract_summary(extract_contract(token_document))
        assert "Token" in summary
        assert "pragma solidity^0.8.20;" in summary
        assert "Ownable, Pausable" in summary
        assert "functions:[/dim] 1" in summary

    def test_summary_without_inheritance(self):
        contract = extract_contract({"ast": {"nodes": [{"nodeType": "ContractDefinition", "name": "Solo"}]}})
        assert "No inheritance" in format_contract_summary(contract)

    def test_format_function(self, token_document):
        transfer = extract_contract(token_document).functions[0]
        text = format_function(transfer)
        assert "transfer" in text
        assert "external" in text
        assert "to: address" in text
        assert "Outputs" in text
        assert "whenNotPaused, onlyOwner" in text
        assert "IERC20" in text

    def test_format_variable(self):
        variable = Variable(
            name="MAX",
            type="uint256",
            visibility="public",
            constant=True,
            mutability="constant",
            value="(10 ** 18)",
        )
        text = format_variable(variable)
        assert "MAX" in text
        assert "Constant:[/green] yes" in text
        assert "(10 ** 18)" in text

    def test_format_event_marks_indexed(self):
        text = format_event(Event("Transfer", (Parameter("from", "address", True),)))
        assert "from: address" in text
        assert "(indexed)" in text

    def test_format_member_dispatch(self):
        assert "Struct:" in format_member(Struct("S", (Variable("a", "bool"),)))
        assert "Enum:" in format_member(Enum("E", ("X", "Y")))
        assert "Import:" in format_member(Import("/abs/A.sol", "A.sol", "A"))

    def test_markup_is_escaped(self):
        text = format_variable(Variable("weird", "Foo[bold]"))
        assert "Foo\\[bold]" in text


class TestRegistryTotals:
    def test_totals(self, write_document, data_dir: Path, token_document):
        write_document("Token.json", token_document)
        write_document("Other.json", {
            "ast": {"nodes": [{"nodeType": "ContractDefinition", "name": "Other", "nodes": [
                {"nodeType": "EventDefinition", "name": "A"},
                {"nodeType": "EventDefinition", "name": "B"},
            ]}]}
        })
        totals = registry_totals(build_registry(data_dir))
        assert totals["events"] == 3
        assert totals["functions"] == 1


# =============================================================================
# Command Line
# =============================================================================


class TestCommandLine:
    """Test argument parsing and the --list mode."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.folder is None
        assert not args.list
        assert not args.lenient
        assert not args.no_recursive

    def test_format_listing(self, write_document, data_dir: Path, token_document):
        write_document("Token.json", token_document)
        listing = format_listing(build_registry(data_dir))
        assert listing.startswith("Token is Ownable, Pausable (")
        assert "1 functions" in listing

    def test_list_mode(self, write_document, data_dir: Path, token_document, capsys):
        write_document("Token.json", token_document)
        assert main([str(data_dir), "--list"]) == 0
        assert "Token" in capsys.readouterr().out

    def test_list_mode_writes_no_log_file(
        self, write_document, data_dir: Path, token_document, isolated_data_path: Path
    ):
        write_document("Token.json", token_document)
        assert main([str(data_dir), "--list"]) == 0
        assert not (isolated_data_path / "solexplorer.log").exists()

    def test_list_mode_reports_error(self, write_document, data_dir: Path, capsys):
        write_document("Broken.json", "{")
        assert main([str(data_dir), "--list"]) == 1
        assert "Error parsing contract files" in capsys.readouterr().err

    def test_lenient_list_mode(self, write_document, data_dir: Path, token_document, capsys):
        write_document("Token.json", token_document)
        write_document("Broken.json", "{")
        assert main([str(data_dir), "--list", "--lenient"]) == 0
        out = capsys.readouterr().out
        assert "Token" in out
        assert "skipped" in out

    def test_init_config(self, isolated_data_path: Path, capsys):
        assert main(["--init-config"]) == 0
        assert (isolated_data_path / "config.yaml").exists()
        assert main(["--init-config"]) == 0
        assert "already exists" in capsys.readouterr().out
