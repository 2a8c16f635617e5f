from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from ryandata_validation_rules.protocols import Translator


@dataclass
class RulesConfig:
    """Defaults used by the rule builders.

    Column names are read from the environment when the config is created.
    """

    deleted_at_column: str = field(
        default_factory=lambda: os.getenv("RYANDATA_RULES_DELETED_AT_COLUMN", "deleted_at")
    )
    id_column: str = field(default_factory=lambda: os.getenv("RYANDATA_RULES_ID_COLUMN", "id"))
    translator: Optional[Translator] = None

    def translate(self, text: str | None) -> str | None:
        """Translate a display label, passing None through untouched."""
        if text is None or self.translator is None:
            return text
        return self.translator(text)


_default_config: Optional[RulesConfig] = None


def get_default_config() -> RulesConfig:
    """Get or create the process-wide default config.

    Returns:
        Shared RulesConfig instance.
    """
    global _default_config
    if _default_config is None:
        _default_config = RulesConfig()
    return _default_config


def reset_default_config() -> None:
    """Drop the cached default config so the environment is read again."""
    global _default_config
    _default_config = None
