import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from widgetspec.services import ResolvedWidget, resolve

if sys.stdout.encoding and sys.stdout.encoding.lower() != 'utf-8':
    try:
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')
    except AttributeError:
        pass

console = Console(soft_wrap=False, color_system='auto')


def _trim(text: str, limit: int = 70) -> str:
    text = text.strip()
    if not text:
        return ""
    return text if len(text) <= limit else f"{text[: limit - 1]}..."


def _load_spec(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def _build_status_panel(result: ResolvedWidget, path: str) -> Panel:
    spec = result.spec or {}
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="cyan", no_wrap=True)
    table.add_column(justify="left", style="bold white")
    table.add_row("File", _trim(path, 60))
    table.add_row("Status", "[green]valid[/]" if result.valid else "[red]invalid[/]")
    table.add_row("Kind", str(spec.get("kind", "-")))
    table.add_row("Mapping", "inferred" if result.mapping_inferred else ("given" if spec.get("mapping") else "-"))
    if result.children:
        table.add_row("Children", str(len(result.children)))
    return Panel(table, title="Widget spec", border_style="green" if result.valid else "red")


def _build_messages_panel(result: ResolvedWidget) -> Optional[Panel]:
    rows: List[tuple] = [("error", msg) for msg in result.errors] + [("warning", msg) for msg in result.warnings]
    if not rows:
        return None
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Level", justify="center", no_wrap=True)
    table.add_column("Message", style="white", overflow="fold")
    for level, message in rows:
        style = "red" if level == "error" else "yellow"
        table.add_row(f"[{style}]{level}[/]", message)
    return Panel(table, title="Diagnostics", border_style="red" if result.errors else "yellow")


def _print_resolved(result: ResolvedWidget, prefix: str = "") -> None:
    spec = result.spec or {}
    mapping = spec.get("mapping")
    if mapping:
        console.print(Panel(JSON.from_data(mapping, indent=2), title=f"{prefix}Mapping", border_style="cyan", expand=False))
    dumped: Dict[str, Any] = result.to_dict()
    if dumped["config"]:
        console.print(Panel(JSON.from_data(dumped["config"], indent=2), title=f"{prefix}Chart config", border_style="magenta", expand=False))
    elif result.config is not None:
        console.print(Panel(Text("Nothing to render for this data.", style="dim"), title=f"{prefix}Chart config", border_style="grey50"))
    for idx, child in enumerate(result.children):
        _print_resolved(child, prefix=f"{prefix}children[{idx}] ")


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate and resolve a widget spec file.")
    parser.add_argument("spec_path")
    parser.add_argument("--max-depth", type=int, default=None)
    parser.add_argument("--raw", action="store_true", help="print the resolved result as plain JSON")
    args = parser.parse_args()

    result = resolve(_load_spec(args.spec_path), max_depth=args.max_depth)

    if args.raw:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        console.print(_build_status_panel(result, args.spec_path))
        messages = _build_messages_panel(result)
        if messages is not None:
            console.print(messages)
        if result.valid:
            _print_resolved(result)

    if not result.valid:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
