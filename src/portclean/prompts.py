"""Yes/no confirmation prompts.

Blank input declines: only ``y`` or ``yes`` (any case) confirm, matching the
``(y/N)`` suffix shown on every prompt.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

Confirmer = Callable[[str], bool]

PROMPT_SUFFIX = "(y/N)"

_AFFIRMATIVE = {"y", "yes"}


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in _AFFIRMATIVE


def ask_yes_no(question: str, input_func: Callable[[str], str] = input) -> bool:
    """Block until the user answers *question*; end of input counts as no."""
    try:
        answer = input_func(question)
    except EOFError:
        logger.debug("No input available for prompt; treating as no")
        print()
        return False
    return is_affirmative(answer)
