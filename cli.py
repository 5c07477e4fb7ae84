# cli.py
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.estoque import EstoqueClient, EstoqueError

console = Console()
c = EstoqueClient(base_url=os.environ.get("ESTOQUE_URL", "http://127.0.0.1:3000"))


# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Estoque",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Nome", style="bold", width=30)
    table.add_column("Qtd", justify="right", width=8)
    table.add_column("Preço", justify="right", width=12)

    for p in products:
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("nome", "N/A"),
            str(p.get("quantidade", 0)),
            f"R$ {p.get('preco', 0):.2f}",
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner and reports the outcome.
    Returns the result, or None if the call failed.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except EstoqueError as e:
        status_message = f"Error: {e.message}"
    except Exception as e:
        status_message = f"Error: {e}"
    console.print(show_status(status_message, False))
    return None


def refresh_products():
    # the list is always re-fetched after a mutation
    global product_cache
    products = try_api(c.list_products)
    if products is not None:
        product_cache = products
        show_products(products)


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    ids = [str(p.get("id")) for p in product_cache]
    return WordCompleter(ids, ignore_case=True)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "📦 Estoque",
        "[bold blue]Inventory CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_id() -> Optional[int]:
    raw = prompt_with_autocomplete("Product ID", completer=get_product_completer()).strip()
    try:
        return int(raw)
    except ValueError:
        console.print(f"[red]'{raw}' is not a product id[/red]")
        return None


# ---------------------------
# Main menu
# ---------------------------
def menu():
    console.clear()
    console.print(create_header())
    refresh_products()

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "4", "✏️ Edit product"),
            ("2", "ℹ️ Get product by ID", "5", "🗑️ Delete product"),
            ("3", "➕ New product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "4", "5", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            refresh_products()

        elif choice == "2":
            pid = ask_product_id()
            if pid is not None:
                resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
                if resp:
                    show_products([resp])

        elif choice == "3":
            nome = prompt_with_autocomplete("Nome").strip()
            quantidade = IntPrompt.ask("📦 Quantidade", default=1)
            preco = ask_float("💰 Preço", default=10.0)
            resp = try_api(
                c.create_product, nome, quantidade, preco,
                success_msg=f"Product '{nome}' created"
            )
            if resp:
                refresh_products()

        elif choice == "4":
            pid = ask_product_id()
            if pid is None:
                continue
            current = try_api(c.get_product, pid)
            if not current:
                continue
            # empty answers keep the current value
            fields: Dict[str, Any] = {}
            nome = prompt_with_autocomplete("Nome", default=current["nome"]).strip()
            if nome != current["nome"]:
                fields["nome"] = nome
            quantidade = IntPrompt.ask("📦 Quantidade", default=current["quantidade"])
            if quantidade != current["quantidade"]:
                fields["quantidade"] = quantidade
            preco = ask_float("💰 Preço", default=current["preco"])
            if preco != current["preco"]:
                fields["preco"] = preco
            if not fields:
                console.print("[italic yellow]Nothing changed[/italic yellow]")
                continue
            resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
            if resp:
                refresh_products()

        elif choice == "5":
            pid = ask_product_id()
            if pid is not None and Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_products()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Até logo! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
