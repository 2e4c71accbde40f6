"""
Command-based CLI: a small in-memory task manager.

    python examples/tasks.py add "Buy groceries" --priority high
    python examples/tasks.py list --all
    python examples/tasks.py done 1
    python examples/tasks.py add --help
"""
from dataclasses import dataclass

from rich.console import Console

from clargs import Cli, ParseResult, handle, merge, opt, pipe, pos

console = Console()


@dataclass
class Task:
    id: int
    text: str
    priority: str = "medium"
    done: bool = False


TASKS = [Task(1, "Example task")]


def add_task(result: ParseResult) -> None:
    text = " ".join(result.positionals[0])
    task = Task(len(TASKS) + 1, text, result.values["priority"])
    TASKS.append(task)
    if result.values["verbose"]:
        console.print(f"[dim]Storing in {result.values['file']}[/]")
    console.print(f"Added task #{task.id}: {task.text} ({task.priority})")


def list_tasks(result: ParseResult) -> None:
    for task in TASKS:
        if task.done and not result.values["all"]:
            continue
        mark = "x" if task.done else " "
        console.print(f"[{mark}] #{task.id} {task.text} [dim]({task.priority})[/]")


def complete_task(result: ParseResult) -> None:
    task_id = result.positionals[0]
    for task in TASKS:
        if task.id == task_id:
            task.done = True
            console.print(f"Completed task #{task.id}")
            return
    console.print(f"[red]No task #{task_id}[/]")


add = pipe(
    merge(
        opt.options(
            priority=opt.enum(["low", "medium", "high"], aliases=["p"], default="medium")
        ),
        pos.positionals(pos.variadic("string", name="text", required=True)),
    ),
    handle(add_task, description="Add a new task"),
)

cli = (
    Cli("tasks", version="1.0.0", description="A simple task manager")
    .globals(
        opt.options(
            file=opt.string(
                aliases=["f"], default="tasks.json", description="Task storage file"
            ),
            verbose=opt.boolean(
                aliases=["v"], default=False, description="Show detailed output"
            ),
        )
    )
    .command("add", add)
    .command(
        "list",
        handle(
            opt.options(all=opt.boolean(aliases=["a"], default=False)),
            list_tasks,
            description="List tasks",
        ),
    )
    .command(
        "done",
        handle(
            pos.positionals(pos.number(name="id", required=True)),
            complete_task,
            description="Mark a task as done",
        ),
    )
    .default_command("list")
)

if __name__ == "__main__":
    cli.run()
