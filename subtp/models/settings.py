# subtp/models/settings.py
"""Parser and renderer settings.

Both dataclasses have working defaults, so callers only build them when
they need non-default behaviour. ``from_config`` accepts a plain dict
(e.g. loaded from JSON by the caller) and ``to_dict`` produces one.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DuplicateKeyPolicy, NewlineStyle


@dataclass
class ParserSettings:
    """Settings consumed by the SRT and WebVTT parsers."""

    # Repeated cue/region setting keys: keep the last one, or fail the parse.
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS

    @classmethod
    def from_config(cls, cfg: dict) -> ParserSettings:
        """Create ParserSettings from a config dictionary.

        Raises:
            ValueError: if a value is not a recognised option.
        """
        return cls(
            duplicate_keys=DuplicateKeyPolicy(
                cfg.get("duplicate_keys", DuplicateKeyPolicy.LAST_WINS.value)
            ),
        )

    def to_dict(self) -> dict:
        return {"duplicate_keys": self.duplicate_keys.value}


@dataclass
class RenderSettings:
    """Settings consumed by the SRT and WebVTT writers."""

    newline: NewlineStyle = NewlineStyle.LF

    @classmethod
    def from_config(cls, cfg: dict) -> RenderSettings:
        """Create RenderSettings from a config dictionary.

        Raises:
            ValueError: if a value is not a recognised option.
        """
        return cls(
            newline=NewlineStyle(cfg.get("newline", NewlineStyle.LF.value)),
        )

    def to_dict(self) -> dict:
        return {"newline": self.newline.value}
