# EasyArgs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration file loader for EasyArgs.

A declaration file describes a `DeclarationSet` in YAML or TOML:

    program: resize
    unknown_tokens: warn
    required:
      - {type: string, name: path, label: path, description: Image path}
    optional:
      - {type: int, name: width, default: 640, flag: --width, label: px,
         description: Output width}
    boolean:
      - {name: verbose, flag: --verbose, description: Verbose output}
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from easyargs.logger import logger
from easyargs.parser.argument import BooleanArgument, OptionalArgument, RequiredArgument
from easyargs.parser.argument_type import ArgumentType
from easyargs.parser.declarations import DeclarationSet, UnknownTokenPolicy


def _coerce_argument_type(value: Any) -> ArgumentType:
    if isinstance(value, ArgumentType):
        return value
    return ArgumentType(value)


class RawRequired(BaseModel):
    """Required argument entry of a declaration file."""

    model_config = ConfigDict(extra="forbid")

    type: ArgumentType
    name: str
    label: str | None = None
    description: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ArgumentType:
        return _coerce_argument_type(value)

    def to_argument(self) -> RequiredArgument:
        return RequiredArgument(
            type=self.type,
            name=self.name,
            label=self.label or self.name,
            description=self.description,
        )


class RawOptional(BaseModel):
    """Optional argument entry of a declaration file."""

    model_config = ConfigDict(extra="forbid")

    type: ArgumentType
    name: str
    default: Any
    flag: str
    label: str | None = None
    description: str = ""
    format: str | None = None
    precision: int | None = Field(default=None, ge=0)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ArgumentType:
        return _coerce_argument_type(value)

    @model_validator(mode="after")
    def validate_default(self) -> RawOptional:
        self.default = self.type.validate_default(self.default)
        return self

    def to_argument(self) -> OptionalArgument:
        return OptionalArgument(
            type=self.type,
            name=self.name,
            default=self.default,
            flag=self.flag,
            label=self.label or self.name,
            description=self.description,
            formatter=self.format,
            precision=self.precision,
        )


class RawBoolean(BaseModel):
    """Boolean argument entry of a declaration file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    flag: str
    description: str = ""

    def to_argument(self) -> BooleanArgument:
        return BooleanArgument(name=self.name, flag=self.flag, description=self.description)


class DeclarationConfig(BaseModel):
    """EasyArgs declaration file model."""

    model_config = ConfigDict(extra="forbid")

    program: str | None = None
    unknown_tokens: UnknownTokenPolicy = UnknownTokenPolicy.WARN
    required: list[RawRequired] = Field(default_factory=list)
    optional: list[RawOptional] = Field(default_factory=list)
    boolean: list[RawBoolean] = Field(default_factory=list)

    def to_declarations(self) -> DeclarationSet:
        return DeclarationSet(
            required=[raw.to_argument() for raw in self.required],
            optional=[raw.to_argument() for raw in self.optional],
            boolean=[raw.to_argument() for raw in self.boolean],
            unknown_tokens=self.unknown_tokens,
        )


def find_declaration_file() -> Path | None:
    """Return the first declaration file found in the usual locations."""
    candidates = [
        Path.cwd() / "easyargs.yaml",
        Path.cwd() / "easyargs.toml",
        Path.cwd() / ".easyargs.yaml",
        Path.cwd() / ".easyargs.toml",
        Path(os.environ.get("EASYARGS_CONFIG", "easyargs.yaml")),
    ]
    return next((p for p in candidates if p.is_file()), None)


def load_config(file_path: Path | str) -> DeclarationConfig:
    """
    Load and validate a declaration file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        DeclarationConfig: The validated file contents.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the file is not a mapping.
        pydantic.ValidationError: If an entry is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such declaration file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported declaration format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Declaration file must contain a mapping of argument groups.\n"
            "Example:\n"
            "program: 'greet'\n"
            "required:\n"
            "  - type: int\n"
            "    name: count\n"
            "    description: 'Number of greetings'"
        )

    config = DeclarationConfig.model_validate(raw_config)
    logger.debug(
        "Loaded %d declaration(s) from '%s'",
        len(config.required) + len(config.optional) + len(config.boolean),
        path,
    )
    return config


def loader(file_path: Path | str) -> DeclarationSet:
    """Load a declaration file straight into a `DeclarationSet`."""
    return load_config(file_path).to_declarations()
