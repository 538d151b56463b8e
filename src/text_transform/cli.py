"""
Text Transform Command Line Interface

Main entry point for the txtx CLI.
"""

import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from text_transform.exceptions import TextTransformError
from text_transform.logging_config import get_logger, setup_logging

console = Console()
logger = get_logger("cli")

TRUE_VALUES = ("true", "yes", "1", "on")
FALSE_VALUES = ("false", "no", "0", "off")


def fail(message: str, hint: Optional[str] = None) -> None:
    """Print an error (and optional hint) and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]")
    sys.exit(1)


def load_toolkit():
    from text_transform.runner import get_toolkit

    try:
        return get_toolkit()
    except TextTransformError as e:
        logger.error("Could not build toolkit: %s", e.message)
        fail(str(e))


def load_settings():
    from text_transform.config import get_settings

    try:
        return get_settings()
    except TextTransformError as e:
        fail(str(e))


def read_input(input_text: Optional[str], words: Tuple[str, ...]) -> str:
    """Input precedence: --input, then positional words, then piped stdin."""
    if input_text is not None:
        return input_text
    if words:
        return " ".join(words)
    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        return ""
    return stdin.read().rstrip("\n")


def guard_input_size(text: str) -> None:
    from text_transform.runner import check_input_size

    try:
        check_input_size(text, load_settings().max_input_size)
    except TextTransformError as e:
        fail(e.message, e.remediation)


def coerce_option(option, raw: str) -> Any:
    """Convert a `key=value` string using the option's declared type.

    Raises:
        click.BadParameter: If the value does not fit the type
    """
    if option.type == "number":
        try:
            number = float(raw)
        except ValueError:
            raise click.BadParameter(f"'{option.key}' expects a number, got '{raw}'")
        return int(number) if number.is_integer() else number
    if option.type == "checkbox":
        lowered = raw.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise click.BadParameter(f"'{option.key}' expects true or false, got '{raw}'")
    if option.type == "select" and option.options:
        choices = [choice.value for choice in option.options]
        if raw not in choices:
            raise click.BadParameter(f"'{option.key}' must be one of: {', '.join(choices)}")
    return raw


def parse_tool_options(tool, pairs: Tuple[str, ...]) -> Dict[str, Any]:
    declared = {option.key: option for option in tool.options}
    options: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"Options must look like key=value, got '{pair}'")
        key = key.strip()
        if key not in declared:
            known = ", ".join(declared) or "none"
            raise click.BadParameter(f"Unknown option '{key}' for {tool.id} (options: {known})")
        options[key] = coerce_option(declared[key], raw)
    return options


@click.group()
@click.version_option(package_name="text-transform")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """txtx: 100+ text and data transformations"""
    setup_logging(logging.DEBUG if verbose else None)


@main.command("list")
@click.option("--category", "-c", help="Only list tools of this category slug")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def list_tools(category: Optional[str], json_output: bool):
    """List tools grouped by category."""
    registry = load_toolkit().tools

    categories = registry.list_all_categories()
    if category:
        match = registry.categories.get_category_by_slug(category)
        if match is None:
            slugs = ", ".join(registry.categories.list_category_slugs())
            fail(f"Unknown category '{category}'", f"Available categories: {slugs}")
        categories = [match]

    if json_output:
        data = {
            c.slug: [tool.model_dump() for tool in registry.get_tools_by_category(c.id)]
            for c in categories
        }
        click.echo(json.dumps(data, indent=2))
        return

    for c in categories:
        tools = registry.get_tools_by_category(c.id)
        table = Table(title=f"{c.icon} {c.name} ({len(tools)})", title_justify="left")
        table.add_column("Tool", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Description", style="dim")
        for tool in tools:
            table.add_row(tool.slug, tool.name, tool.description)
        console.print(table)
        console.print()

    console.print(f"[bold]Total tools:[/bold] {sum(registry.category_tool_count(c.id) for c in categories)}")


@main.command()
def categories():
    """List categories with tool counts."""
    registry = load_toolkit().tools

    table = Table(title="Categories", title_justify="left")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Tools", justify="right")
    table.add_column("Description", style="dim")
    for category in registry.list_categories_with_counts():
        table.add_row(category.slug, category.name, str(category.tool_count), category.description)
    console.print(table)


@main.command()
@click.argument("query", nargs=-1, required=True)
def search(query: Tuple[str, ...]):
    """Search tools by name, description and keywords.

    Every word must match.

    Examples:
        txtx search base64
        txtx search hex color
    """
    registry = load_toolkit().tools
    text = " ".join(query)
    results = registry.search_tools(text)
    if not results:
        console.print(f"[yellow]No tools match '{escape(text)}'[/yellow]")
        return

    table = Table(title=f"{len(results)} result(s)", title_justify="left")
    table.add_column("Address", style="cyan", no_wrap=True)
    table.add_column("Name")
    for tool in results:
        category = registry.categories.get_category_by_id(tool.category_id)
        table.add_row(f"{category.slug if category else tool.category_id}/{tool.slug}", tool.name)
    console.print(table)


@main.command()
@click.argument("category")
@click.argument("tool_slug", metavar="TOOL")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def info(category: str, tool_slug: str, json_output: bool):
    """Show a tool's metadata and options."""
    registry = load_toolkit().tools
    tool = registry.get_tool(category, tool_slug)
    if tool is None:
        fail(f"Unknown tool '{category}/{tool_slug}'", "Run 'txtx list' to see available tools")

    if json_output:
        click.echo(json.dumps(tool.model_dump(), indent=2))
        return

    console.print(f"[bold blue]{escape(tool.name)}[/bold blue] [dim]({tool.id})[/dim]")
    console.print(escape(tool.description))
    console.print()
    console.print(f"[bold]Function:[/bold] {tool.transform_fn}")
    if tool.reverse_fn:
        reverse = [t for t in registry.list_all_tools() if t.transform_fn == tool.reverse_fn]
        label = f"{reverse[0].id} ({tool.reverse_fn})" if reverse else tool.reverse_fn
        console.print(f"[bold]Reverse:[/bold] {label}")
    if tool.is_generator:
        console.print("[bold]Input:[/bold] not required (generator)")
    console.print(f"[bold]Keywords:[/bold] {', '.join(tool.keywords)}")

    if tool.options:
        console.print()
        table = Table(title="Options", title_justify="left")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Type")
        table.add_column("Default")
        table.add_column("Choices / range", style="dim")
        for option in tool.options:
            if option.options:
                extra = ", ".join(choice.value for choice in option.options)
            elif option.min is not None or option.max is not None:
                extra = f"{option.min if option.min is not None else ''}..{option.max if option.max is not None else ''}"
            else:
                extra = ""
            default = "[red]required[/red]" if option.required else escape(str(option.default))
            table.add_row(option.key, option.type, default, escape(extra))
        console.print(table)

    related = registry.get_related_tools(tool.id)
    if related:
        console.print()
        console.print(f"[bold]Related:[/bold] {', '.join(t.slug for t in related)}")


@main.command()
@click.argument("category")
@click.argument("tool_slug", metavar="TOOL")
@click.argument("words", nargs=-1)
@click.option("--input", "-i", "input_text", help="Input text (instead of arguments or stdin)")
@click.option("--option", "-o", "option_pairs", multiple=True, help="Tool option as key=value")
def tool(category: str, tool_slug: str, words: Tuple[str, ...], input_text: Optional[str], option_pairs: Tuple[str, ...]):
    """Run a catalog tool.

    Examples:
        txtx tool encoding base64-encode "hello"
        txtx tool formatters format-json -o indent=4 '{"a":1}'
        echo "Hello" | txtx tool ciphers rot13
    """
    from text_transform.runner import missing_required_options, run_tool_sync

    toolkit = load_toolkit()
    found = toolkit.tools.get_tool(category, tool_slug)
    if found is None:
        fail(f"Unknown tool '{category}/{tool_slug}'", "Run 'txtx list' to see available tools")

    try:
        options = parse_tool_options(found, option_pairs)
    except click.BadParameter as e:
        fail(e.message)

    missing = missing_required_options(found, options)
    if missing:
        fail(
            f"Missing required option(s): {', '.join(missing)}",
            f"Pass them with -o, e.g. -o {missing[0]}=...",
        )

    text = read_input(input_text, words)
    if not text and not found.is_generator:
        fail("No input provided", f'Usage: txtx tool {category} {tool_slug} "your text here"')
    guard_input_size(text)

    try:
        result = run_tool_sync(toolkit, found, text, options)
    except TextTransformError as e:
        fail(str(e))
    except Exception as e:
        logger.debug("Tool %s failed", found.id, exc_info=True)
        fail(str(e))

    click.echo(result)


@main.command()
@click.argument("command_name", metavar="COMMAND")
@click.argument("words", nargs=-1)
@click.option("--input", "-i", "input_text", help="Input text (instead of arguments or stdin)")
@click.option("--key", "-k", help="Key for hmac, vigenere, xor (default: 'key') or cssvar name")
@click.option("--shift", "-s", type=int, help="Shift for caesar (default: 3)")
def run(command_name: str, words: Tuple[str, ...], input_text: Optional[str], key: Optional[str], shift: Optional[int]):
    """Run a short command.

    A second word selects a subcommand when the command has one.

    Examples:
        txtx run camel "hello world"
        txtx run base64 decode aGVsbG8=
        txtx run caesar encode -s 5 "attack at dawn"
        txtx run uuid
    """
    from text_transform.commands import execute_command, get_command

    command = get_command(command_name)
    if command is None:
        fail(f"Unknown command '{command_name}'", "Run 'txtx commands' to see available commands")

    words = tuple(words)
    subcommand = None
    if command.subcommands and words and command.get_subcommand(words[0]):
        subcommand, words = words[0], words[1:]

    text = read_input(input_text, words)
    if not text and not command.generator:
        fail("No input provided", f'Usage: txtx run {command_name} "your text here"')
    guard_input_size(text)

    toolkit = load_toolkit()
    try:
        result = asyncio.run(
            execute_command(toolkit.functions, command_name, subcommand, text, key=key, shift=shift)
        )
    except TextTransformError as e:
        fail(e.message, e.remediation)
    except Exception as e:
        logger.debug("Command %s failed", command_name, exc_info=True)
        fail(str(e))

    click.echo(result)


@main.command()
def commands():
    """List short commands for `txtx run`."""
    from text_transform.commands import get_commands_by_group

    for group, entries in get_commands_by_group().items():
        console.print(f"[bold]{group.capitalize()}:[/bold]")
        for command in entries:
            subs = ""
            if command.subcommands:
                subs = f" \\[{'|'.join(sub.name for sub in command.subcommands)}]"
            console.print(f"  [cyan]{command.name}[/cyan]{subs} - {escape(command.description)}")
        console.print()


@main.command()
@click.option("--host", help="Bind address (default: TXTX_API_HOST or 127.0.0.1)")
@click.option("--port", type=int, help="Port (default: TXTX_API_PORT or 8000)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the REST API server."""
    import uvicorn

    settings = load_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"[bold blue]Text Transform API[/bold blue] on http://{host}:{port}/api")
    uvicorn.run(
        "text_transform.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
