# src/colloquy/prompt.py
"""Prompt synthesis from persona, rules, context and history."""

import logging
import re
from collections.abc import Mapping, Sequence

from colloquy.models import ConversationTurn
from colloquy.persona import Persona

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{([a-z_]+)\}")

NO_CONTEXT = "none available"
NO_HISTORY = "none yet"


def fill_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute ``{name}`` placeholders in one literal pass.

    Only the template is scanned: braces inside substituted values are
    copied verbatim and never expanded. Unknown placeholders stay as they
    are.
    """
    return PLACEHOLDER_RE.sub(lambda m: values.get(m.group(1), m.group(0)), template)


class PromptSynthesizer:
    """Builds the single prompt string sent to the generative backend.

    The output is a pure function of the inputs. When the prompt would exceed
    ``max_chars``, the oldest history turns are dropped first; retrieved
    context is never cut.
    """

    def __init__(self, max_chars: int = 6000) -> None:
        self.max_chars = max_chars

    def synthesize(
        self,
        persona: Persona,
        rules: Sequence[str],
        context: Sequence[str],
        history: Sequence[ConversationTurn],
        message: str,
    ) -> str:
        """Assemble the prompt.

        Args:
            persona: Persona providing name, role, traits and the template
            rules: Behavioral rules, rendered in order
            context: Retrieved knowledge texts, most relevant first
            history: Conversation so far, oldest first
            message: The new user message

        Returns:
            The prompt string
        """
        values = {
            "persona": persona.name,
            "name": persona.name,
            "role": persona.role,
            "traits": ", ".join(persona.traits),
            "rules": ". ".join(r.rstrip(". ") for r in rules),
            "context": "\n".join(context) if context else NO_CONTEXT,
            "message": message,
        }

        turns = list(history)
        while True:
            values["history"] = "\n".join(t.render() for t in turns) if turns else NO_HISTORY
            prompt = fill_template(persona.template, values)
            if len(prompt) <= self.max_chars or not turns:
                break
            turns.pop(0)

        if len(prompt) > self.max_chars:
            logger.warning(
                "Prompt is %d chars (limit %d) with no history left to drop",
                len(prompt),
                self.max_chars,
            )
        elif len(turns) < len(history):
            logger.debug("Dropped %d oldest history turns", len(history) - len(turns))

        return prompt
