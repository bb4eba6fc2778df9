from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)

def _headers(table_record: Dict[str, Any]) -> List[str]:
    headers = list(table_record.get("columns", {}).keys())
    # Undeclared keys are allowed in records; show them after the declared ones
    for row in table_record.get("data", []):
        for key in row:
            if key not in headers:
                headers.append(key)
    return headers

def build_rich_table(name: str, table_record: Dict[str, Any]) -> RichTable:
    metadata = table_record.get("metadata", {})
    pk = metadata.get("primaryKey")
    headers = _headers(table_record)
    table = RichTable(title=name, box=box.ROUNDED)
    for header in headers:
        table.add_column(header, style="cyan" if header == pk else None)
    for row in table_record.get("data", []):
        table.add_row(*[escape(_cell(row.get(col))) for col in headers])
    return table

def print_table(name: str, table_record: Dict[str, Any], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not table_record.get("data"):
        console.print(f"[dim]{escape(name)}: no rows[/dim]")
        return
    console.print(build_rich_table(name, table_record))
