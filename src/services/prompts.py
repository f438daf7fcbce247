"""
Interactive prompts on standard input/output.
"""

from rich.prompt import Confirm, Prompt

from core.console import console, print_note


def match_option(answer: str, options: list[str]) -> int | None:
    """
    Resolve an answer to an option index.

    Accepts a 1-based number, an exact name or a unique name prefix, all
    case-insensitive.
    """
    if answer.isdigit():
        index = int(answer) - 1
        return index if 0 <= index < len(options) else None

    lowered = answer.lower()
    for index, option in enumerate(options):
        if option.lower() == lowered:
            return index

    prefixed = [i for i, option in enumerate(options) if option.lower().startswith(lowered)]
    if len(prefixed) == 1:
        return prefixed[0]
    return None


def select_one(options: list[str], message: str = "Pick one") -> int | None:
    """Let the operator pick an option; an empty answer aborts with None."""
    for number, option in enumerate(options, start=1):
        console.print(f"  {number}. {option}", markup=False)

    while True:
        answer = Prompt.ask(message, default="", show_default=False, console=console).strip()
        if not answer:
            return None
        index = match_option(answer, options)
        if index is not None:
            return index
        print_note(f"no unique match for {answer!r}, try again (empty input aborts)")


def confirm(message: str) -> bool:
    """Yes/no question that defaults to no."""
    return Confirm.ask(message, default=False, console=console)
