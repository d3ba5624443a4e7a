"""
Generator configuration.

Every table the core consumes (type aliases, synthetic unions, base class
overrides, scalar rendering) lives on GeneratorConfig and is passed into the
interpreter, classifier and synthesizer explicitly. The defaults describe the
Telegram Bot API reference page, the document this generator was written for.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field


# Aliases every document gets: the reference prose spells out scalar names.
BASE_TYPE_ALIASES = {
    "Integer": "Int",
    "Float number": "Float",
    "Boolean": "Bool",
    "True": "Bool",
}

# Multi-word phrases the Bot API repeats often enough to deserve a named union.
# Each target is declared in DEFAULT_SYNTHETIC_UNIONS below.
DOCUMENT_TYPE_ALIASES = {
    "InlineKeyboardMarkup or ReplyKeyboardMarkup or ReplyKeyboardRemove or ForceReply": "ReplyMarkup",
    "Integer or String": "ChatId",
    "InputFile or String": "FileOrPath",
}

# How Scalar names render in the generated Python.
DEFAULT_SCALAR_TYPES = {
    "Int": "int",
    "Float": "float",
    "Bool": "bool",
    "String": "str",
}


class SyntheticUnion(BaseModel):
    """A union the document only describes in prose."""
    name: str
    cases: list[str]


DEFAULT_SYNTHETIC_UNIONS = [
    SyntheticUnion(
        name="ReplyMarkup",
        cases=["InlineKeyboardMarkup", "ReplyKeyboardMarkup", "ReplyKeyboardRemove", "ForceReply"],
    ),
    SyntheticUnion(name="ChatId", cases=["Int", "String"]),
    SyntheticUnion(name="FileOrPath", cases=["InputFile", "String"]),
]

DEFAULT_SOURCE = "TelegramBotAPI.html"
DEFAULT_OUTPUT_DIR = "generated"


class GeneratorConfig(BaseModel):
    """Configuration shared by every pipeline stage."""

    # --- Scanning ---
    heading_tag: str = "h4"                       # Definition headings; others are ignored
    base_url: Optional[str] = None                # Resolves relative links in notes when set

    # --- Type interpretation / classification ---
    type_aliases: dict[str, str] = Field(
        default_factory=lambda: {**BASE_TYPE_ALIASES, **DOCUMENT_TYPE_ALIASES}
    )
    synthetic_unions: list[SyntheticUnion] = Field(
        default_factory=lambda: [u.model_copy(deep=True) for u in DEFAULT_SYNTHETIC_UNIONS]
    )

    # --- Synthesis ---
    scalar_types: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCALAR_TYPES))
    base_overrides: dict[str, str] = Field(default_factory=dict)  # Record title → base class
    namespace: str = "TelegramAPI"                # Class holding the request builders
    fast_initialization: bool = True              # One constructor per union variant
    types_module: str = "models"
    operations_module: str = "api"

    # --- CLI / collaborators ---
    source: str = DEFAULT_SOURCE
    output_dir: str = DEFAULT_OUTPUT_DIR
    log_level: int = logging.WARNING               # CLI stays quiet apart from its result line

    @classmethod
    def plain(cls, **overrides) -> "GeneratorConfig":
        """A configuration without any document-specific aliases or unions."""
        values = {
            "type_aliases": dict(BASE_TYPE_ALIASES),
            "synthetic_unions": [],
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorConfig":
        """
        Build a configuration from APIDOC_* environment variables.

        Call load_dotenv() first to pick up a .env file. Explicit overrides
        win over the environment.
        """
        values = {}
        if os.getenv("APIDOC_SOURCE"):
            values["source"] = os.getenv("APIDOC_SOURCE")
        if os.getenv("APIDOC_OUTPUT_DIR"):
            values["output_dir"] = os.getenv("APIDOC_OUTPUT_DIR")
        if os.getenv("APIDOC_BASE_URL"):
            values["base_url"] = os.getenv("APIDOC_BASE_URL")

        level_name = os.getenv("APIDOC_LOG_LEVEL")
        if level_name:
            # Unknown names fall back to the default rather than failing the run
            level = logging.getLevelName(level_name.upper())
            values["log_level"] = level if isinstance(level, int) else logging.WARNING

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def types_filename(self) -> str:
        return f"{self.types_module}.py"

    @property
    def operations_filename(self) -> str:
        return f"{self.operations_module}.py"
