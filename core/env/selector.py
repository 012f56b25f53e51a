from typing import Callable, Optional, Sequence

import questionary
from questionary import Choice, Separator

from core.env.dispatcher import Action
from core.errors import OperationCancelled, SelectionCancelled
from core.utils import console
from core.utils.cancel import CancellationToken

ALL_FILES = "__all__"
EMPTY_SELECTION_MESSAGE = "Please select at least one file to proceed"

STYLE = questionary.Style(
    [
        ("qmark", "fg:blue bold"),
        ("selected", "fg:cyan bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("instruction", "fg:#888888"),
    ]
)

ACTION_CHOICES = [
    Choice("Encrypt .env files", value=Action.ENCRYPT),
    Choice("Decrypt .env files", value=Action.DECRYPT),
    Choice("Install precommit hook", value=Action.PRECOMMIT),
    Choice("Exit", value=Action.EXIT),
]


def validate_selection(answer) -> object:
    """Reject an empty confirmation, questionary shows the returned text."""
    if len(answer) == 0:
        return EMPTY_SELECTION_MESSAGE
    return True


def ask_checkbox(message: str, choices: list) -> Optional[list]:
    return questionary.checkbox(
        message,
        choices=choices,
        validate=validate_selection,
        instruction="(Space to select, Enter to confirm, Ctrl+C to exit)",
        style=STYLE,
    ).unsafe_ask()


def ask_select(message: str, choices: list):
    return questionary.select(
        message,
        choices=choices,
        use_indicator=True,
        style=STYLE,
    ).unsafe_ask()


def file_choices(candidates: Sequence[str]) -> list:
    return [
        Choice("All files", value=ALL_FILES),
        Separator(),
        *[Choice(path, value=path) for path in candidates],
    ]


def select_files(
    candidates: Sequence[str],
    action: str,
    ask: Optional[Callable[[str, list], Optional[list]]] = None,
    token: Optional[CancellationToken] = None,
) -> list[str]:
    """
    Let the operator pick the env files to act on.

    Args:
        candidates (Sequence[str]): Discovered env files.
        action (str): Verb shown in the prompt ("encrypt", "decrypt").
        ask: Checkbox prompt, ``ask_checkbox`` by default.
        token (Optional[CancellationToken]): Tripped when cancelled.

    Returns:
        list[str]: Selected files, every candidate when "All files" is picked,
        ``[]`` when there is nothing to pick from.

    Raises:
        SelectionCancelled: If the operator aborts the prompt.
    """
    if not candidates:
        console.warning("No .env files found in the current directory.")
        return []

    ask = ask or ask_checkbox
    try:
        answer = ask(f"Select .env files to {action}:", file_choices(candidates))
    except KeyboardInterrupt:
        answer = None

    if answer is None:
        if token is not None:
            token.cancel("file selection cancelled")
        raise SelectionCancelled("File selection was cancelled.")

    if ALL_FILES in answer:
        return list(candidates)
    return list(answer)


def select_action(
    ask: Optional[Callable[[str, list], object]] = None,
    token: Optional[CancellationToken] = None,
) -> Action:
    """
    Show the main menu.

    Raises:
        OperationCancelled: If the operator aborts the menu.
    """
    ask = ask or ask_select
    try:
        answer = ask("What would you like to do?", ACTION_CHOICES)
    except KeyboardInterrupt:
        answer = None

    if answer is None:
        if token is not None:
            token.cancel("menu cancelled")
        raise OperationCancelled("Menu was cancelled.")
    return answer
