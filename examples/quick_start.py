#!/usr/bin/env python3
# Example usage of embedded_json_table_db: a todo database with one "tasks" table.

from rich.console import Console

from embedded_json_table_db import Database, ValidationError
from embedded_json_table_db.render import print_table

console = Console()

def progress_printer(evt):
    if evt.get("pct") == 100:
        console.print(f"[progress] {evt.get('phase')} - {evt.get('msg', '')}", style="dim", markup=False)

def main() -> None:
    # Creates data/todo.json on first run
    db = Database("todo", data_path="data", on_progress=progress_printer)

    if not db.has_table("tasks"):
        db.create_table(
            "tasks",
            {"id": "number", "title": "string", "completed": "boolean"},
            {"primaryKey": "id", "autoIncrement": True, "createdAt": True},
        )
        console.print("Table 'tasks' created successfully.")

    rec = db.insert("tasks", {"title": "Finish the project", "completed": False})
    console.print(f"Inserted task #{rec['id']}")

    # Wrong type for a boolean column: rejected, nothing written
    try:
        db.insert("tasks", {"title": "Broken", "completed": "no"})
    except ValidationError as e:
        console.print(f"[yellow]Rejected: {e}[/yellow]")

    print_table("tasks", db.get_all("tasks"), console=console)

if __name__ == "__main__":
    main()
