from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map the YAML fixture file to typed structures.
# Rules are dry-run at load time so a bad template fails here, not on the first make().

DONOR_KINDS = ("constant", "sequence", "repeating", "indexed", "chained", "make", "same")

_FORMAT_ERRORS = (KeyError, IndexError, ValueError, AttributeError, TypeError)


class IndexedDecl(BaseModel):
    # Indexed values render a format string with the pull index ("C{index}").
    model_config = ConfigDict(extra="forbid")
    format: str
    offset: int = 0

    @model_validator(mode="after")
    def check_format_renders(self) -> IndexedDecl:
        try:
            self.format.format(index=self.offset)
        except _FORMAT_ERRORS as exc:
            raise ValueError(f"indexed.format {self.format!r} cannot render {{index}}: {exc!r}") from exc
        return self


class ChainedDecl(BaseModel):
    # Chained values start at `first`, then either re-format or add a numeric step.
    model_config = ConfigDict(extra="forbid")
    first: Any
    format: str | None = None
    step: int | float | None = None

    @model_validator(mode="after")
    def check_one_rule(self) -> ChainedDecl:
        if (self.format is None) == (self.step is None):
            raise ValueError("chained requires exactly one of 'format' or 'step'")
        if self.step is not None:
            if isinstance(self.first, bool) or not isinstance(self.first, (int, float)):
                raise ValueError(f"chained.step requires a numeric 'first', got {self.first!r}")
            return self
        assert self.format is not None
        try:
            # Two steps: the second one sees a rendered string, as every later pull does.
            self.format.format(previous=self.format.format(previous=self.first))
        except _FORMAT_ERRORS as exc:
            raise ValueError(f"chained.format {self.format!r} cannot render {{previous}}: {exc!r}") from exc
        return self


class DonorDecl(BaseModel):
    # One property declaration; exactly one donor kind must be set.
    model_config = ConfigDict(extra="forbid")
    constant: Any = None
    sequence: list[Any] | None = None
    repeating: list[Any] | None = None
    indexed: IndexedDecl | None = None
    chained: ChainedDecl | None = None
    make: str | None = None
    same: str | None = None

    @model_validator(mode="after")
    def check_exactly_one_kind(self) -> DonorDecl:
        chosen = [kind for kind in DONOR_KINDS if kind in self.model_fields_set]
        if len(chosen) != 1:
            raise ValueError(f"property needs exactly one of {list(DONOR_KINDS)}, got {chosen}")
        # Only a constant may be null; every other kind needs a body.
        if chosen[0] != "constant" and getattr(self, chosen[0]) is None:
            raise ValueError(f"property kind '{chosen[0]}' must not be null")
        return self

    @property
    def kind(self) -> str:
        return next(kind for kind in DONOR_KINDS if kind in self.model_fields_set)


class FixtureDecl(BaseModel):
    model_config = ConfigDict(extra="forbid")
    properties: dict[str, DonorDecl] = Field(default_factory=dict)


class LoggingConfig(BaseModel):
    # Logging section selects a structured log sink for the CLI.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "none"
    path: str | None = None


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of a fixture file.
    model_config = ConfigDict(extra="forbid")
    version: Literal[1] = 1
    fixtures: dict[str, FixtureDecl] = Field(min_length=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
