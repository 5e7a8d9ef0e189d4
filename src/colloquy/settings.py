# src/colloquy/settings.py
"""Behavioral settings for Colloquy.

Settings are passed programmatically - the library does not read from
environment variables. For env-based config, use ``colloquy.config`` at
the application layer and pass the resulting Settings explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from colloquy.providers.base import DEFAULT_STOP_SEQUENCES, SamplingParams

InterruptPolicy = Literal["queue", "reject"]
PendingPolicy = Literal["fifo", "latest_wins"]

# Output profiles: spoken replies must be short, chat replies may be longer
OUTPUT_PROFILES: dict[str, dict[str, int]] = {
    "voice": {
        "max_response_chars": 80,
        "max_tokens": 30,
    },
    "text": {
        "max_response_chars": 400,
        "max_tokens": 200,
    },
}


class Settings(BaseModel):
    """Behavioral settings for Colloquy.

    Example:
        settings = Settings(default_k=5, generation_timeout=10.0)

        # Or start from an output profile
        settings = Settings.with_profile("text", temperature=0.4)
    """

    # Chunking
    chunk_size: int = Field(default=1000, gt=0)
    chunk_overlap: int = Field(default=200, ge=0)

    # Retrieval
    default_k: int = Field(default=3, gt=0)
    min_score: float = Field(default=0.0, ge=0.0, le=1.0)
    history_turns: int = Field(default=0, ge=0)  # user turns folded into the query

    # Prompt and response bounds
    max_prompt_chars: int = Field(default=6000, gt=0)
    max_response_chars: int = Field(default=80, gt=0)

    # Sampling (pass-through to the generative backend)
    temperature: float = 0.2
    top_p: float = 0.8
    max_tokens: int = 30
    stop_sequences: tuple[str, ...] = DEFAULT_STOP_SEQUENCES

    # Session behavior
    generation_timeout: float = Field(default=15.0, gt=0)
    interrupt_policy: InterruptPolicy = "queue"
    pending_policy: PendingPolicy = "fifo"
    max_pending_inputs: int = Field(default=8, gt=0)

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = 2

    @model_validator(mode="after")
    def _check_chunk_policy(self) -> Settings:
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be less than "
                f"chunk_size ({self.chunk_size})"
            )
        return self

    @classmethod
    def with_profile(cls, profile: Literal["voice", "text"], **overrides: Any) -> Settings:
        """Create Settings from an output profile.

        - "voice": replies of at most 80 characters, for speech synthesis
        - "text": longer replies for typed chat

        Args:
            profile: The output profile to use.
            **overrides: Additional settings to override profile defaults.
        """
        if profile not in OUTPUT_PROFILES:
            raise ValueError(
                f"Unknown profile '{profile}'. "
                f"Available profiles: {list(OUTPUT_PROFILES.keys())}"
            )

        profile_settings: dict[str, Any] = dict(OUTPUT_PROFILES[profile])
        profile_settings.update(overrides)
        return cls(**profile_settings)

    def sampling_params(self) -> SamplingParams:
        return SamplingParams(
            temperature=self.temperature,
            top_p=self.top_p,
            max_tokens=self.max_tokens,
            stop=self.stop_sequences,
        )
