# tests/test_config.py
"""Tests for configuration loading."""

import os

import pytest

from colloquy.config import (
    ColloquyConfig,
    ConfigError,
    build_settings,
    create_colloquy,
    find_config_file,
    get_colloquy_config,
    get_settings_from_env,
    load_config,
    load_env_file,
    load_persona,
    validate_config,
)
from colloquy.configuration import LiteLLMProvider
from colloquy.embedder import ClientEmbedder, HashingEmbedder
from colloquy.knowledge import builtin_sources
from colloquy.persona import Persona


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from COLLOQUY_* variables and config files on the host."""
    for key in list(os.environ):
        if key.startswith("COLLOQUY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path, text, name="colloquy.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestEnvFile:
    def test_loads_values(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MY_TEST_KEY", "placeholder")
        monkeypatch.delenv("MY_TEST_KEY")
        env = tmp_path / ".env"
        env.write_text("# comment\nMY_TEST_KEY='secret'\n\nBROKEN LINE\n", encoding="utf-8")

        load_env_file(env)

        assert os.environ["MY_TEST_KEY"] == "secret"

    def test_does_not_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MY_TEST_KEY", "original")
        env = tmp_path / ".env"
        env.write_text("MY_TEST_KEY=new\n", encoding="utf-8")

        load_env_file(env)

        assert os.environ["MY_TEST_KEY"] == "original"

    def test_missing_file_is_ignored(self, tmp_path):
        assert load_env_file(tmp_path / "nope.env") == {}

    def test_export_prefix(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MY_EXPORTED_KEY", "placeholder")
        monkeypatch.delenv("MY_EXPORTED_KEY")
        env = tmp_path / ".env"
        env.write_text('export MY_EXPORTED_KEY="a=b"\n', encoding="utf-8")

        assert load_env_file(env) == {"MY_EXPORTED_KEY": "a=b"}
        assert os.environ["MY_EXPORTED_KEY"] == "a=b"


class TestFindConfig:
    def test_finds_in_parent(self, tmp_path):
        config = write_config(tmp_path, "provider: litellm\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config

    def test_none_when_absent(self, tmp_path):
        assert find_config_file(tmp_path) is None

    def test_rc_file(self, tmp_path):
        config = write_config(tmp_path, "provider: litellm\n", name=".colloquyrc")
        assert find_config_file(tmp_path) == config


class TestValidateConfig:
    def test_unknown_keys(self):
        warnings = validate_config({"provider": "litellm", "llm": "x", "settings": {"k": 1}})
        assert len(warnings) == 2
        assert "llm" in warnings[0]
        assert "k" in warnings[1]

    def test_mistyped_sections(self):
        warnings = validate_config({"settings": [1, 2], "documents": "guide.md"})
        assert len(warnings) == 2
        assert "mapping" in warnings[0]
        assert "list" in warnings[1]

    def test_valid(self):
        assert validate_config({"provider": "litellm", "settings": {"default_k": 2}}) == []

    def test_load_config_empty_file(self, tmp_path):
        assert load_config(write_config(tmp_path, "")) == {}


class TestBuildSettings:
    def test_defaults(self):
        settings = build_settings({}, env_settings={})
        assert settings.chunk_size == 1000
        assert settings.max_response_chars == 80

    def test_yaml_settings(self):
        settings = build_settings({"settings": {"default_k": 5, "temperature": 0.7}}, {})
        assert settings.default_k == 5
        assert settings.temperature == 0.7

    def test_env_overrides_yaml(self):
        settings = build_settings({"settings": {"default_k": 5}}, {"default_k": 2})
        assert settings.default_k == 2

    def test_output_profile(self):
        settings = build_settings({"settings": {"output_profile": "text", "max_tokens": 50}}, {})
        assert settings.max_response_chars == 400
        assert settings.max_tokens == 50

    def test_stop_sequences_from_yaml(self):
        settings = build_settings({"settings": {"stop_sequences": ["User:", "END"]}}, {})
        assert settings.stop_sequences == ("User:", "END")

    def test_invalid_value_raises(self):
        with pytest.raises(ValueError):
            build_settings({"settings": {"chunk_size": 100, "chunk_overlap": 100}}, {})


class TestSettingsFromEnv:
    def test_parses_values(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_DEFAULT_K", "4")
        monkeypatch.setenv("COLLOQUY_GENERATION_TIMEOUT", "2.5")
        monkeypatch.setenv("COLLOQUY_PENDING_POLICY", "latest_wins")

        assert get_settings_from_env() == {
            "default_k": 4,
            "generation_timeout": 2.5,
            "pending_policy": "latest_wins",
        }

    def test_bad_value_ignored(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_DEFAULT_K", "many")
        assert get_settings_from_env() == {}

    def test_stop_sequences(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_STOP_SEQUENCES", "\\n\\n|User:")
        assert get_settings_from_env()["stop_sequences"] == ("\n\n", "User:")


class TestLoadPersona:
    def test_none_gives_default(self):
        default = Persona(name="Dflt")
        assert load_persona(None, default=default) is default
        assert load_persona(None) == Persona()

    def test_inline_mapping(self):
        persona = load_persona({"name": "Max", "rules": ["Be brief"]})
        assert persona.name == "Max"
        assert persona.rules == ("Be brief",)

    def test_relative_file(self, tmp_path):
        (tmp_path / "max.yaml").write_text("name: Max\ngreeting: Hi Sarah\n", encoding="utf-8")
        persona = load_persona("max.yaml", base_dir=tmp_path)
        assert persona.greeting == "Hi Sarah"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_persona("missing.yaml", base_dir=tmp_path)

    def test_invalid_definition(self):
        with pytest.raises(ValueError):
            load_persona({"traits": 42})

    def test_not_a_mapping(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_persona(tmp_path / "bad.yaml")


class TestGetColloquyConfig:
    def test_defaults_without_file(self):
        config = get_colloquy_config()

        assert isinstance(config, ColloquyConfig)
        assert config.provider == "litellm"
        assert config.llm_model == "ollama/tinyllama"
        assert config.embedding_model == "hashing"
        assert config.persona.name == "Max"
        assert config.builtin_knowledge is True

    def test_env_models(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_LLM_MODEL", "openai/gpt-4o-mini")
        monkeypatch.setenv("COLLOQUY_API_KEY", "sk-test")

        config = get_colloquy_config()

        assert config.llm_model == "openai/gpt-4o-mini"
        assert config.api_key == "sk-test"

    def test_yaml_file(self, tmp_path):
        (tmp_path / "docs").mkdir()
        path = write_config(
            tmp_path,
            "llm_model: ollama/llama3\n"
            "builtin_knowledge: false\n"
            "documents:\n  - docs/guide.md\n"
            "persona:\n  name: Robin\n"
            "settings:\n  default_k: 2\n",
        )

        config = get_colloquy_config(path)

        assert config.llm_model == "ollama/llama3"
        assert config.builtin_knowledge is False
        assert config.documents == [tmp_path / "docs" / "guide.md"]
        assert config.persona.name == "Robin"
        assert config.settings.default_k == 2

    def test_generic_persona_without_builtin_knowledge(self, tmp_path):
        path = write_config(tmp_path, "builtin_knowledge: false\n")
        assert get_colloquy_config(path).persona == Persona()

    def test_missing_explicit_file(self, tmp_path):
        result = get_colloquy_config(tmp_path / "nope.yaml")
        assert isinstance(result, ConfigError)
        assert "not found" in result.message

    def test_yaml_syntax_error(self, tmp_path):
        path = write_config(tmp_path, "settings: [unclosed\n")
        result = get_colloquy_config(path)
        assert isinstance(result, ConfigError)
        assert result.suggestion

    def test_invalid_settings(self, tmp_path):
        path = write_config(tmp_path, "settings:\n  interrupt_policy: shout\n")
        result = get_colloquy_config(path)
        assert isinstance(result, ConfigError)
        assert "Invalid settings" in result.message

    def test_unknown_provider(self, tmp_path):
        path = write_config(tmp_path, "provider: mystery\n")
        result = get_colloquy_config(path)
        assert isinstance(result, ConfigError)
        assert "mystery" in result.message

    def test_documents_must_be_a_list(self, tmp_path):
        path = write_config(tmp_path, "documents: guide.md\n")
        assert isinstance(get_colloquy_config(path), ConfigError)

    def test_custom_provider_requires_classes(self, tmp_path):
        path = write_config(tmp_path, "provider: custom\nembedder: a.B\n")
        assert isinstance(get_colloquy_config(path), ConfigError)


class TestCreateColloquy:
    def test_litellm_hashing(self):
        bot = create_colloquy(get_colloquy_config())

        assert isinstance(bot.embedder, HashingEmbedder)
        assert bot.persona.name == "Max"
        assert bot.chunks == []

    def test_litellm_remote_embedding(self, monkeypatch):
        monkeypatch.setenv("COLLOQUY_EMBEDDING_MODEL", "text-embedding-3-small")
        bot = create_colloquy(get_colloquy_config())
        assert isinstance(bot.embedder, ClientEmbedder)

    def test_custom_provider(self, tmp_path):
        path = write_config(
            tmp_path,
            "provider: custom\n"
            "embedder: colloquy.embedder.HashingEmbedder\n"
            "embedder_kwargs:\n  dimensions: 128\n"
            "llm_client: conftest.FakeLLMClient\n"
            "llm_client_kwargs:\n  replies: ['Custom reply.']\n",
        )
        bot = create_colloquy(get_colloquy_config(path))

        assert bot.embedder.dimensions == 128
        bot.ingest(builtin_sources())
        assert bot.answer("John Kim attestation").text == "Custom reply."

    def test_provider_type(self):
        config = get_colloquy_config()
        provider = LiteLLMProvider(llm=config.llm_model, embedding=config.embedding_model)
        assert provider.uses_hashing
