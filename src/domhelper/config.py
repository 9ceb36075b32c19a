"""Configuration system.

Pydantic models controlling how markup is loaded and how selectors are
translated, optionally read from a YAML file. Entry point: load_config().
"""

import codecs
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from domhelper.exceptions import ConfigError

TAG_NAME_REGEX = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]*$")


class LoaderConfig(BaseModel):
    """Options for turning a markup string into a Document."""

    encoding: str = Field(
        default="utf-8",
        description=(
            "Encoding the markup is re-encoded to before parsing. Characters it "
            "cannot represent become numeric character references."
        ),
    )
    fragment_container: str = Field(
        default="div",
        description=(
            "Tag of the synthetic element holding the top-level nodes of a fragment. "
            "It is never matched by queries and never serialized."
        ),
    )
    remove_comments: bool = Field(
        default=False,
        description="Drop comments while parsing",
    )
    remove_pis: bool = Field(
        default=False,
        description="Drop processing instructions while parsing",
    )
    log_parse_errors: bool = Field(
        default=True,
        description="Log the number of suppressed parser errors at DEBUG level",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to Python's codec registry."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(
                f"Unknown encoding: {v!r}. Use a codec name such as 'utf-8' or 'ascii'."
            ) from None

        # Markup is spliced into ASCII wrapper tags before parsing
        if "<html>".encode(v, errors="replace") != b"<html>":
            raise ValueError(f"Encoding must be ASCII-compatible: {v!r}")
        return v

    @field_validator("fragment_container")
    @classmethod
    def validate_fragment_container(cls, v: str) -> str:
        """Validate that the container is a plain element name."""
        if not TAG_NAME_REGEX.match(v):
            raise ValueError(
                f"fragment_container must be a plain tag name: {v!r}. Use e.g. 'div'."
            )
        return v.lower()


class QueryConfig(BaseModel):
    """Options for CSS selector translation."""

    xhtml: bool = Field(
        default=False,
        description=(
            "Treat element and attribute names in selectors as case-sensitive (XHTML). "
            "When False, names are matched case-insensitively as in HTML."
        ),
    )


class DomHelperConfig(BaseModel):
    """Root configuration object."""

    loader: LoaderConfig = Field(
        default_factory=LoaderConfig,
        description="Markup loading options",
    )
    query: QueryConfig = Field(
        default_factory=QueryConfig,
        description="Selector translation options",
    )


def load_config(path: Path) -> DomHelperConfig:
    """Load and validate a YAML configuration file.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated DomHelperConfig instance

    Raises:
        ConfigError: If config file is not found, invalid YAML, or validation fails
    """
    try:
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ValueError(f"Configuration path is not a file: {path}")

        with path.open("r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)

        # An empty file means "all defaults"
        if config_dict is None:
            return DomHelperConfig()

        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Configuration file must contain a YAML object/dict, "
                f"got {type(config_dict).__name__}"
            )

        return DomHelperConfig(**config_dict)
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}:\n{e}") from e
    except ValueError as e:
        raise ConfigError(str(e)) from e
