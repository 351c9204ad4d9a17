"""Operator prompts rendered with rich."""
from typing import Any, Callable, Optional, Sequence, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..core.browse.actions import Choice
from ..core.exceptions import InvalidInputError, OperatorInterrupted
from ..core.store.models import ListEntry
from ..core.validation import Validator, ensure_valid
from .terminal import PROMPT_ICON, ConsoleReporter

T = TypeVar("T")


class ConsoleOperator:
    """
    Operator backed by the terminal.
    
    Invalid answers are reported and asked again; Ctrl-C or end of input
    raises OperatorInterrupted.
    """
    
    def __init__(self, console: Console, reporter: Optional[ConsoleReporter] = None):
        self._console = console
        self._reporter = reporter or ConsoleReporter(console)
    
    def _ask(self, prompt: Callable[[], T]) -> T:
        try:
            return prompt()
        except (KeyboardInterrupt, EOFError) as e:
            raise OperatorInterrupted() from e
    
    def choose(self, message: str, choices: Sequence[Choice]) -> Any:
        if not choices:
            raise InvalidInputError(f"Nothing to choose for: {message}")
        self._console.print(f"{PROMPT_ICON} [bold]{escape(message)}[/bold]")
        for number, choice in enumerate(choices, start=1):
            self._console.print(f"  [bold]{number}[/bold]. {escape(choice.label)}")
        
        numbers = [str(number) for number in range(1, len(choices) + 1)]
        answer = self._ask(lambda: Prompt.ask(
            "Choose",
            console=self._console,
            choices=numbers,
            show_choices=False
        ))
        return choices[int(answer) - 1].value
    
    def ask_text(self, message: str, validate: Optional[Validator] = None) -> str:
        while True:
            answer = self._ask(lambda: Prompt.ask(
                message, console=self._console, default="", show_default=False
            ))
            if validate is None:
                return answer.strip()
            try:
                return ensure_valid(answer, validate)
            except InvalidInputError as e:
                self._reporter.warn(str(e))
    
    def show_text(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)
    
    def show_listing(self, entries: Sequence[ListEntry]) -> None:
        self._console.print("Contents: ")
        for entry in entries:
            self._console.print(f"{entry.type} - {entry.name} ({entry.cid})", markup=False, highlight=False)
    
    def report(self, message: str) -> None:
        self._reporter.success(message)
