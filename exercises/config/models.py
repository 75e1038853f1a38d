"""
Text exercises - Configuration Model
====================================

Defines the Pydantic v2 model shared by every utility in
:mod:`exercises.text`.

Convention
----------
- Every utility accepts an optional ``config``; ``None`` means
  ``TextConfig()`` defaults.
- Models are frozen so one instance can be shared between calls.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SMILE = "\U0001F600"  # 😀


class TextConfig(BaseModel):
    """Settings for the text exercises.

    Attributes:
        smile_glyph: Single character repeated by ``lots_of_smiles``.
        strict:      Validate inputs and raise ``TextInputError`` on
                     malformed values. When False, inputs are trusted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    smile_glyph: str = Field(
        default=DEFAULT_SMILE,
        description="Glyph emitted once per counted unit. Default: 😀",
    )
    strict: bool = Field(
        default=True,
        description="If True, reject malformed input with TextInputError.",
    )

    # -- validators ----------------------------------------------------------

    @field_validator("smile_glyph")
    @classmethod
    def _single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"smile_glyph must be exactly one character, got {v!r}")
        return v
