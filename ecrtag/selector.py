"""
Single-choice terminal prompt.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from rich.console import Console
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from .core.exceptions import EmptyResultError, UserCancelled

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
HELP_TEXT = "↑↓ to move, enter to select, esc to cancel"


class Selector:
    def select(
        self,
        message: str,
        items: Sequence[T],
        label: Callable[[T], str] = str,
    ) -> T:
        """Ask the user to pick one item.

        Args:
            message: Prompt shown above the list.
            items: Items to choose from, in display order.
            label: Renders one item as a row.

        Returns:
            The chosen item.

        Raises:
            UserCancelled: The user aborted the prompt.
        """
        raise NotImplementedError


class SelectApp(App[int]):
    """Inline list that exits with the index of the chosen row."""

    CSS = """
    #prompt {
        height: 1;
    }

    #options {
        height: auto;
    }

    #help {
        height: 1;
        color: $warning;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+c", "cancel", "Cancel", priority=True),
    ]

    def __init__(
        self,
        message: str,
        labels: Sequence[str],
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        super().__init__()
        self.message = message
        self.labels = list(labels)
        self.page_size = page_size

    def compose(self) -> ComposeResult:
        yield Static(
            Text.assemble(("$ ", "bold red"), (self.message, "bold")),
            id="prompt",
        )
        yield OptionList(
            *[
                Option(Text(label), id=str(index))
                for index, label in enumerate(self.labels)
            ],
            id="options",
        )
        yield Static(self._help(0), id="help")

    def on_mount(self) -> None:
        options = self.query_one("#options", OptionList)
        options.styles.box_sizing = "content-box"
        options.styles.max_height = self.page_size
        options.highlighted = 0
        options.focus()

    def on_option_list_option_highlighted(
        self, event: OptionList.OptionHighlighted
    ) -> None:
        self.query_one("#help", Static).update(self._help(event.option_index))

    def on_option_list_option_selected(
        self, event: OptionList.OptionSelected
    ) -> None:
        self.exit(event.option_index)

    def action_cancel(self) -> None:
        self.exit(None)

    def _help(self, index: int) -> str:
        if len(self.labels) <= self.page_size:
            return HELP_TEXT
        return f"{HELP_TEXT} [{index + 1}/{len(self.labels)}]"


class TerminalSelector(Selector):
    page_size: int
    inline: bool
    console: Console

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        inline: bool = True,
        console: Console | None = None,
    ):
        """Initialize.

        Args:
            page_size:
                Rows visible at once. Longer lists scroll.
            inline:
                Render below the cursor instead of taking the full screen.
            console:
                Console the chosen answer is echoed to.
        """
        self.page_size = page_size
        self.inline = inline
        self.console = console or Console()

    def select(
        self,
        message: str,
        items: Sequence[T],
        label: Callable[[T], str] = str,
    ) -> T:
        if not items:
            raise EmptyResultError(f"Nothing to select for {message}")

        labels = [label(item) for item in items]
        app = SelectApp(message, labels, page_size=self.page_size)
        try:
            index = app.run(inline=self.inline)
        except KeyboardInterrupt as e:
            raise UserCancelled("Selection cancelled") from e
        if index is None:
            raise UserCancelled("Selection cancelled")

        self.console.print(
            Text.assemble(
                ("$ ", "bold red"),
                f"{message} ",
                (labels[index], "bold green"),
            )
        )
        return items[index]
