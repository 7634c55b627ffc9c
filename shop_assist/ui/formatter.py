# shop_assist/ui/formatter.py

"""Presentation layer: colour (rich) and plain-text output for a session.

The workflow never prints directly. It hands a message and a
:class:`MessageStyle` to a formatter, so the same session code serves a
decorated terminal and a plain stream (pipes, logs, tests).
"""

import sys
from enum import Enum
from typing import Protocol, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shop_assist.config.settings import Settings
from shop_assist.services.planner import AffordabilityPlan


class MessageStyle(Enum):
    """Semantic role of an emitted message."""

    HEADING = "heading"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    MUTED = "muted"
    PROMPT = "prompt"


def format_money(amount: float) -> str:
    """Render an amount as ``$12.34``."""
    return f"{Settings.CURRENCY_SYMBOL}{amount:.2f}"


class Formatter(Protocol):
    """Capability set the session needs from its output layer."""

    def emit(
        self, message: str, style: MessageStyle = MessageStyle.INFO, icon: str = ""
    ) -> None: ...

    def prompt(self, message: str) -> None: ...

    def rule(self, char: str = "─") -> None: ...

    def show_plan(self, plan: AffordabilityPlan) -> None: ...


_RICH_STYLES: dict[MessageStyle, str] = {
    MessageStyle.HEADING: "bold blue",
    MessageStyle.INFO: "",
    MessageStyle.SUCCESS: "bold green",
    MessageStyle.WARNING: "yellow",
    MessageStyle.ERROR: "bold red",
    MessageStyle.MUTED: "bright_black",
    MessageStyle.PROMPT: "bold cyan",
}


class RichFormatter:
    """Coloured, emoji-decorated output through a rich ``Console``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def emit(
        self, message: str, style: MessageStyle = MessageStyle.INFO, icon: str = ""
    ) -> None:
        """Print one styled line; product names are never parsed as markup."""
        text = f"{icon} {message}" if icon else message
        self.console.print(Text(text, style=_RICH_STYLES[style]))

    def prompt(self, message: str) -> None:
        """Print a prompt and leave the cursor on the same line."""
        self.console.print(
            Text(message, style=_RICH_STYLES[MessageStyle.PROMPT]), end=" "
        )

    def rule(self, char: str = "─") -> None:
        self.console.print(
            Text(char * Settings.RULE_WIDTH, style="bright_black")
        )

    def show_plan(self, plan: AffordabilityPlan) -> None:
        """Render the cheapest-first plan as a rich table."""
        table = Table(
            title="💡 Recommended purchase plan (cheapest first)",
            title_style="yellow",
            show_footer=True,
        )
        table.add_column(
            "Product",
            footer=Text("Total\nRemaining Budget", style="bold"),
            style="white",
            header_style="bright_blue",
            min_width=Settings.PLAN_NAME_WIDTH,
        )
        table.add_column(
            "Price",
            footer=Text(
                f"{format_money(plan.total_affordable)}\n"
                f"{format_money(plan.remaining_budget)}",
                style="bold cyan",
            ),
            justify="right",
            style="green",
            header_style="bright_blue",
        )

        for item in plan.affordable_items:
            table.add_row(Text(item.name), format_money(item.price))

        self.console.print(table)


class PlainFormatter:
    """Undecorated output to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def emit(
        self, message: str, style: MessageStyle = MessageStyle.INFO, icon: str = ""
    ) -> None:
        print(message, file=self.stream)

    def prompt(self, message: str) -> None:
        self.stream.write(f"{message} ")
        self.stream.flush()

    def rule(self, char: str = "─") -> None:
        print("-" * Settings.RULE_WIDTH, file=self.stream)

    def show_plan(self, plan: AffordabilityPlan) -> None:
        """Render the plan as fixed-width ``name  $price`` lines."""
        width = Settings.PLAN_NAME_WIDTH
        lines = [
            "Recommended purchase plan (cheapest first):",
            "-" * Settings.RULE_WIDTH,
            f"{'Product':<{width}} Price",
            "-" * Settings.RULE_WIDTH,
        ]
        lines.extend(
            f"{item.name:<{width}} {format_money(item.price)}"
            for item in plan.affordable_items
        )
        lines.append("-" * Settings.RULE_WIDTH)
        lines.append(f"{'Total':<{width}} {format_money(plan.total_affordable)}")
        lines.append(
            f"{'Remaining Budget':<{width}} "
            f"{format_money(plan.remaining_budget)}"
        )
        print("\n".join(lines), file=self.stream)


def make_formatter(plain: bool) -> Formatter:
    """Pick the plain or rich formatter."""
    if plain:
        return PlainFormatter()
    return RichFormatter()
