"""
Main entry point for userform.

Interactive CLI for filling in the registration form, pre-filling it from
randomuser.me, registering users and browsing the stored list.

File: main.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-17
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table
from rich import box

from userform import (
    AppConfig,
    FormInvalid,
    IntakeWorkflow,
    RandomUserClient,
    UserFormError,
    UserStore,
    ValidationError,
    setup_logging,
)
from userform.intake import (
    filter_name_input,
    paginate,
    pick_birth_date,
    render_empty_listing,
    render_errors,
    render_form,
    render_user_page,
)

console = Console()

load_dotenv()

log = logging.getLogger(__name__)

# Menu definitions
COMMANDS = {
    "1": {
        "name": "Fill in form",
        "description": "Enter name, email, birth date, address and password",
    },
    "2": {
        "name": "Fetch from API",
        "description": "Pre-fill the form with a random user from randomuser.me",
    },
    "3": {
        "name": "Register",
        "description": "Validate the form and save the user",
    },
    "4": {
        "name": "List users",
        "description": "Browse registered users",
    },
    "5": {
        "name": "Show form",
        "description": "Display the current form values",
    },
}


def show_menu():
    """Display the main menu."""
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registration Form[/]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")

    for key, cmd in COMMANDS.items():
        table.add_row(key, cmd["name"], cmd["description"])

    console.print(table)
    console.print("[dim]  q  Quit[/]")
    console.print()


def _prompt_birth_date(current: str) -> str:
    """Ask until a date inside the allowed range is given."""
    while True:
        value = Prompt.ask("Birth date (YYYY-MM-DD)", default=current or None)
        if not value:
            return current
        try:
            return pick_birth_date(value)
        except ValidationError as e:
            console.print(f"[red]{e.message}[/]")


def _fill_form(workflow: IntakeWorkflow):
    """Prompt for each field; empty input keeps the current value."""
    form = workflow.form

    name = Prompt.ask("Name", default=form.name or None)
    email = Prompt.ask("Email", default=form.email or None)
    birth_date = _prompt_birth_date(form.birth_date)
    address = Prompt.ask("Address", default=form.address or None)
    password = Prompt.ask("Password", password=True, default=form.password or None, show_default=False)

    form.fill(
        name=filter_name_input(name or ""),
        email=email or "",
        birth_date=birth_date,
        address=address or "",
        password=password or "",
    )
    console.print(render_form(form))


async def _prefill(workflow: IntakeWorkflow):
    console.print("[dim]Fetching random user...[/]")
    form = await workflow.prefill()
    console.print(render_form(form))


async def _register(workflow: IntakeWorkflow):
    try:
        user_id = await workflow.submit()
    except FormInvalid as e:
        console.print(render_errors(e.errors))
        return

    console.print(f"[green]User registered successfully[/] [dim](id {user_id})[/]")
    _show_page(workflow, 0)


def _show_page(workflow: IntakeWorkflow, index: int):
    if not workflow.users:
        console.print(render_empty_listing())
        return
    console.print(render_user_page(workflow.page(index)))


async def _list_users(workflow: IntakeWorkflow, interactive: bool = True):
    await workflow.refresh()
    if not workflow.users:
        console.print(render_empty_listing())
        return

    if not interactive:
        for page in paginate(workflow.users, workflow.rows_per_page):
            console.print(render_user_page(page))
        return

    index = 0
    while True:
        page = workflow.page(index)
        console.print(render_user_page(page))
        if workflow.page_count == 1:
            return

        choices = ["q"]
        if page.has_previous:
            choices.insert(0, "p")
        if page.has_next:
            choices.insert(0, "n")
        choice = Prompt.ask("Page (n = next, p = previous, q = back)", choices=choices, default="q")
        if choice == "n":
            index += 1
        elif choice == "p":
            index -= 1
        else:
            return


async def run_command(workflow: IntakeWorkflow, choice: str):
    """Run a single menu command, reporting failures without exiting."""
    try:
        if choice == "1":
            _fill_form(workflow)
        elif choice == "2":
            await _prefill(workflow)
        elif choice == "3":
            await _register(workflow)
        elif choice == "4":
            await _list_users(workflow)
        elif choice == "5":
            console.print(render_form(workflow.form))
    except UserFormError as e:
        log.error(f"Command {choice} failed: {e}")
        console.print(f"[red]Error:[/] {escape(str(e))}")


async def main():
    """Main entry point with interactive menu."""
    config = AppConfig.from_env()
    setup_logging(config.log_dir)
    log.info(f"Starting with config: {config.to_dict()}")

    store = UserStore(config.db_path)
    provider = RandomUserClient(config.randomuser_url, timeout=config.request_timeout)
    workflow = IntakeWorkflow(store, provider, rows_per_page=config.rows_per_page)

    try:
        await store.open()
    except UserFormError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        return 1

    try:
        # Command-line argument for non-interactive use
        if len(sys.argv) > 1:
            command = sys.argv[1].lower()
            if command == "list":
                await _list_users(workflow, interactive=False)
            elif command == "prefill":
                await run_command(workflow, "2")
            else:
                console.print(f"[red]Unknown command: {command}[/]")
                console.print("[dim]Valid commands: list, prefill[/]")
                return 1
            return 0

        await workflow.refresh()

        # Interactive mode
        while True:
            show_menu()

            choice = Prompt.ask(
                "Select command",
                choices=list(COMMANDS.keys()) + ["q"],
                default="q",
            )

            if choice == "q":
                console.print("[dim]Goodbye![/]")
                break

            await run_command(workflow, choice)

            console.print()
            if not Confirm.ask("Continue?", default=True):
                console.print("[dim]Goodbye![/]")
                break
    finally:
        await store.close()

    return 0


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
