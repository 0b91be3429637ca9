"""Height offset entry: parsing and the prompt contract."""
from __future__ import annotations

from collections import deque
import logging
import math
from typing import Iterable, Optional, Protocol

logger = logging.getLogger(__name__)

# Returned by a prompt when the operator cancels or types something unusable.
HEIGHT_ABANDONED: float = -1.0


class HeightPrompt(Protocol):
    def ask(self, prompt_text: str, default_value: str) -> float:
        """Return the entered height in millimetres, or HEIGHT_ABANDONED."""
        ...


def parse_height_text(text: Optional[str]) -> float:
    """
    Parse the dialog text as a height in millimetres.

    Returns:
        The number, or HEIGHT_ABANDONED for empty, non-numeric or non-finite input.
    """
    if text is None:
        return HEIGHT_ABANDONED
    try:
        value = float(text.strip())
    except ValueError:
        logger.debug(f"Could not parse height {text!r}.")
        return HEIGHT_ABANDONED
    if not math.isfinite(value):
        return HEIGHT_ABANDONED
    return value


class ScriptedHeightPrompt:
    """
    Answers prompts from a queue of raw texts, as if typed and confirmed.
    ``None`` stands for the Cancel button; an exhausted queue cancels too.
    """

    def __init__(self, answers: Iterable[Optional[str]] = ()) -> None:
        self._answers: deque[Optional[str]] = deque(answers)
        self.asked: list[tuple[str, str]] = []

    def ask(self, prompt_text: str, default_value: str) -> float:
        self.asked.append((prompt_text, default_value))
        if not self._answers:
            return HEIGHT_ABANDONED
        return parse_height_text(self._answers.popleft())
