"""
Configuration management for the URL normalizer.

Two layers live here:
- NormalizationContext: the immutable option set every normalization call
  is parameterized by
- Settings: environment-driven settings (pydantic-settings) that callers can
  turn into a context explicitly
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Transforms that never change which resource a URI identifies (on by default)
SAFE_NORMALIZATIONS: Mapping[str, bool] = MappingProxyType(
    {
        "lower_case_scheme": True,
        "lower_case_host": True,
        "upper_case_percent_encoding": True,
        "decode_unreserved_characters": True,
        "encode_illegal_characters": True,
        "add_trailing_slash": True,
        "remove_default_port": True,
        "remove_dot_segments": True,
    }
)

# Transforms that may change the referenced resource (opt-in)
UNSAFE_NORMALIZATIONS: Mapping[str, bool] = MappingProxyType(
    {
        "remove_directory_index": False,
        "remove_fragment": False,
        "remove_ip": False,
        "remove_duplicate_slash": False,
        "remove_duplicate_query": False,
        "remove_empty_query": False,
        "remove_empty_user_info": False,
        "remove_trailing_dot_in_host": False,
        "force_http": False,
        "remove_www": False,
        "sort_query": False,
        "decode_special_characters": False,
    }
)

ALL_OPTIONS = tuple(SAFE_NORMALIZATIONS) + tuple(UNSAFE_NORMALIZATIONS)

# Declared for compatibility; no algorithm is attached to these yet.
UNIMPLEMENTED_OPTIONS = frozenset(
    {
        "remove_directory_index",
        "remove_ip",
        "remove_duplicate_query",
        "remove_www",
        "sort_query",
    }
)


def _option_name(name: str) -> str:
    """Map 'lower-case-scheme?' style names onto field names."""
    return name.rstrip("?").replace("-", "_")


class NormalizationContext(BaseModel):
    """
    Immutable set of normalization options.

    Safe options default to True, unsafe ones to False. Build variants with
    merge() rather than mutating; instances are frozen.

    Usage:
        ctx = DEFAULT_CONTEXT.merge(remove_fragment=True)
        canonicalize("http://example.com/#top", ctx)  # 'http://example.com/'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Safe
    lower_case_scheme: bool = True
    lower_case_host: bool = True
    upper_case_percent_encoding: bool = True
    decode_unreserved_characters: bool = True
    encode_illegal_characters: bool = True
    add_trailing_slash: bool = True
    remove_default_port: bool = True
    remove_dot_segments: bool = True

    # Unsafe
    remove_directory_index: bool = False
    remove_fragment: bool = False
    remove_ip: bool = False
    remove_duplicate_slash: bool = False
    remove_duplicate_query: bool = False
    remove_empty_query: bool = False
    remove_empty_user_info: bool = False
    remove_trailing_dot_in_host: bool = False
    force_http: bool = False
    remove_www: bool = False
    sort_query: bool = False
    decode_special_characters: bool = False

    @model_validator(mode="after")
    def warn_unimplemented(self) -> "NormalizationContext":
        enabled = sorted(name for name in UNIMPLEMENTED_OPTIONS if getattr(self, name))
        if enabled:
            logger.warning(
                "Normalization options %s are not implemented and will be ignored",
                ", ".join(enabled),
            )
        return self

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "NormalizationContext":
        """
        Build a context from a mapping of option names.

        Accepts both field names ('remove_fragment') and the hyphenated
        predicate spelling ('remove-fragment?'). Unspecified options keep
        their defaults.

        Raises:
            pydantic.ValidationError: If an option name is unknown
        """
        return cls.model_validate({_option_name(k): v for k, v in options.items()})

    def merge(self, **overrides: bool) -> "NormalizationContext":
        """Return a new context with the given options overridden."""
        values = self.model_dump()
        values.update(overrides)
        return type(self).model_validate(values)

    def as_dict(self) -> dict[str, bool]:
        """Return the options as a plain dictionary."""
        return self.model_dump()


DEFAULT_CONTEXT = NormalizationContext()
SAFE_CONTEXT = DEFAULT_CONTEXT


class ContextSettings(BaseSettings):
    """Environment-overridable defaults for each normalization option."""

    lower_case_scheme: bool = Field(default=True, description="Lower-case the scheme")
    lower_case_host: bool = Field(default=True, description="Lower-case the host")
    upper_case_percent_encoding: bool = Field(
        default=True, description="Upper-case hex digits of percent-encoded octets"
    )
    decode_unreserved_characters: bool = Field(
        default=True, description="Decode percent-encoded unreserved characters"
    )
    encode_illegal_characters: bool = Field(
        default=True, description="Use raw (encoded) component forms"
    )
    add_trailing_slash: bool = Field(
        default=True, description="Rewrite an empty path to '/'"
    )
    remove_default_port: bool = Field(
        default=True, description="Drop the port when it is the scheme default"
    )
    remove_dot_segments: bool = Field(
        default=True, description="Resolve '.' and '..' path segments"
    )

    remove_directory_index: bool = Field(default=False)
    remove_fragment: bool = Field(default=False, description="Drop the fragment")
    remove_ip: bool = Field(default=False)
    remove_duplicate_slash: bool = Field(
        default=False, description="Collapse runs of '/' in the path"
    )
    remove_duplicate_query: bool = Field(default=False)
    remove_empty_query: bool = Field(default=False, description="Drop an empty query")
    remove_empty_user_info: bool = Field(
        default=False, description="Drop empty user-info ('' or ':')"
    )
    remove_trailing_dot_in_host: bool = Field(
        default=False, description="Strip one trailing '.' from the host"
    )
    force_http: bool = Field(default=False, description="Rewrite the scheme to http")
    remove_www: bool = Field(default=False)
    sort_query: bool = Field(default=False)
    decode_special_characters: bool = Field(
        default=False, description="Decode sub-delimiters, ':' and '@' in the path"
    )

    model_config = SettingsConfigDict(env_prefix="URLNORM_NORMALIZATION__")


class Settings(BaseSettings):
    """Main configuration."""

    normalization: ContextSettings = Field(default_factory=ContextSettings)

    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="URLNORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    def to_context(self) -> NormalizationContext:
        """Build the normalization context described by these settings."""
        return NormalizationContext.model_validate(self.normalization.model_dump())


# Global settings instance
_config: Optional[Settings] = None


def get_config() -> Settings:
    """Get or create the global settings instance."""
    global _config
    if _config is None:
        _config = Settings()
    return _config


def reset_config() -> None:
    """Reset the global settings (mainly for testing)."""
    global _config
    _config = None
