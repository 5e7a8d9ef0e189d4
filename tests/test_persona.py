# tests/test_persona.py
"""Tests for Persona."""

import random

import pytest
from pydantic import ValidationError

from colloquy.persona import DEFAULT_TEMPLATE, PERSONA_VERSION, Persona


class TestPersona:
    def test_defaults(self):
        persona = Persona()
        assert persona.version == PERSONA_VERSION
        assert persona.template == DEFAULT_TEMPLATE
        assert persona.name == "Assistant"

    def test_is_frozen(self):
        persona = Persona()
        with pytest.raises(ValidationError):
            persona.name = "Other"  # type: ignore[misc]

    def test_lists_become_tuples(self):
        persona = Persona(traits=["Calm"], rules=["Be brief"])
        assert persona.traits == ("Calm",)
        assert persona.rules == ("Be brief",)

    def test_random_starter(self):
        persona = Persona(conversation_starters=("a", "b", "c"))
        assert persona.random_starter(random.Random(7)) in {"a", "b", "c"}

    def test_random_starter_falls_back_to_greeting(self):
        persona = Persona(greeting="Hello Sarah")
        assert persona.random_starter() == "Hello Sarah"
