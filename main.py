"""CopyDrive System Prompt — Entry Point.

Usage:
    # Show the compiled project + copy context and its hash (no LLM call)
    python main.py compile --input copy_request.json

    # Generate the system prompt (calls the LLM; persists when copyId is set)
    python main.py generate --input copy_request.json
    python main.py generate --copy-type anuncio --framework aida --objective venda_direta

    # List the known option codes
    python main.py catalog
    python main.py catalog framework

    # Start the HTTP service
    python main.py serve --port 8000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

import config
from pipeline.descriptors import CATALOGS, describe, list_codes
from pipeline.llm import LLMError, get_usage_summary
from pipeline.system_prompt_generator import SystemPromptError, SystemPromptGenerator
from schemas.system_prompt import GenerateSystemPromptRequest

console = Console()


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_inputs(args: argparse.Namespace) -> dict:
    """Build the request dict from a JSON file, then apply CLI overrides."""
    inputs: dict = {}
    if args.input:
        path = Path(args.input)
        if not path.exists():
            console.print(f"[red]Input file not found: {path}[/red]")
            sys.exit(1)
        inputs = json.loads(path.read_text("utf-8"))

    overrides = {
        "copyType": args.copy_type,
        "framework": args.framework,
        "objective": args.objective,
        "emotionalFocus": args.emotional_focus,
        "copyId": args.copy_id,
        "projectId": args.project_id,
        "platform": args.platform,
    }
    for key, value in overrides.items():
        if value is not None:
            inputs[key] = value
    if args.styles:
        inputs["styles"] = args.styles
    return inputs


def build_request(inputs: dict) -> GenerateSystemPromptRequest:
    try:
        return GenerateSystemPromptRequest.model_validate(inputs)
    except ValidationError as e:
        console.print(f"[red]Invalid request:[/red]\n{e}")
        sys.exit(1)


def run_compile(inputs: dict):
    request = build_request(inputs)
    generator = SystemPromptGenerator()
    try:
        compiled = generator.compile_context(request)
        context_hash = generator.hash_context(compiled)
    except SystemPromptError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    console.print(Panel(compiled.full_context, title="Compiled context", border_style="cyan"))
    console.print(f"  [green]Context hash:[/green] {context_hash}")
    console.print(
        f"  [dim]project={len(compiled.project_prompt)} chars, "
        f"copy={len(compiled.copy_prompt)} chars[/dim]"
    )


def run_generate(inputs: dict, output: str | None = None):
    request = build_request(inputs)
    generator = SystemPromptGenerator()
    try:
        result = generator.run(request)
    except (SystemPromptError, LLMError) as e:
        console.print(f"[red]Generation failed:[/red] {e}")
        sys.exit(1)

    title = "System prompt (fallback template)" if result.used_fallback else "System prompt"
    console.print(Panel(result.system_prompt, title=title, border_style="green"))
    console.print(f"  [green]Context hash:[/green] {result.context_hash}")
    console.print(f"  [green]Model:[/green] {result.model}")
    usage = get_usage_summary()
    console.print(f"  [dim]Tokens: {usage['total_tokens']:,} over {usage['calls']} call(s)[/dim]")

    if output:
        path = Path(output)
        path.write_text(json.dumps(result.to_response(), indent=2, ensure_ascii=False), "utf-8")
        console.print(f"  [green]Output saved:[/green] {path}")


def run_catalog(catalog: str | None):
    names = [catalog] if catalog else list(CATALOGS)
    for name in names:
        table = Table(title=name, show_lines=False)
        table.add_column("code", style="bold")
        table.add_column("description")
        for code in list_codes(name):
            text = describe(name, code)
            table.add_row(code, text if len(text) <= 100 else text[:97] + "...")
        console.print(table)


def run_serve(host: str, port: int):
    import uvicorn

    uvicorn.run("server:app", host=host, port=port, log_level="info")


def main():
    parser = argparse.ArgumentParser(
        description="CopyDrive — System Prompt Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # -- compile command --
    comp = subparsers.add_parser("compile", help="Compile the context and hash it (no LLM call)")
    _add_input_args(comp)

    # -- generate command --
    gen = subparsers.add_parser("generate", help="Generate the system prompt for a copy")
    _add_input_args(gen)
    gen.add_argument("--output", "-o", help="Write the JSON response to this file")

    # -- catalog command --
    cat = subparsers.add_parser("catalog", help="List known option codes")
    cat.add_argument("catalog", nargs="?", choices=list(CATALOGS), help="Only this catalog")

    # -- serve command --
    srv = subparsers.add_parser("serve", help="Run the HTTP service")
    srv.add_argument("--host", default=config.HOST)
    srv.add_argument("--port", type=int, default=config.PORT)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    setup_logging()

    if args.command == "serve":
        run_serve(args.host, args.port)
        return

    console.print(
        Panel(
            "[bold]COPYDRIVE SYSTEM PROMPT[/bold]\n"
            "Context compiler",
            border_style="bright_magenta",
        )
    )

    if args.command == "compile":
        run_compile(load_inputs(args))
    elif args.command == "generate":
        run_generate(load_inputs(args), args.output)
    elif args.command == "catalog":
        run_catalog(args.catalog)


def _add_input_args(parser: argparse.ArgumentParser):
    """Add common input arguments to a subparser."""
    parser.add_argument("--input", "-i", help="Path to JSON request file (camelCase keys)")
    parser.add_argument("--copy-type", "-t", help="Copy type code (e.g. anuncio, landing_page)")
    parser.add_argument("--framework", "-f", help="Framework code (e.g. aida, pas)")
    parser.add_argument("--objective", help="Objective code (e.g. venda_direta)")
    parser.add_argument("--styles", "-s", nargs="*", help="Style codes")
    parser.add_argument("--emotional-focus", "-e", help="Emotional focus code (dor, desejo, ...)")
    parser.add_argument("--copy-id", help="Copy id to persist the result on")
    parser.add_argument("--project-id", help="Project id to load identity/methodology from")
    parser.add_argument("--platform", help="Target platform for conteudo copies")


if __name__ == "__main__":
    main()
