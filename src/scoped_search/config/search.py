"""Config – SearchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from scoped_search.config.settings.base import Settings
from scoped_search.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class SearchSettings(Settings):
    """Search client settings, read from ``SEARCH_*`` environment variables.

    ``timeout`` is in seconds; an empty ``SEARCH_TIMEOUT`` disables it.
    """

    _prefix: ClassVar[str] = "SEARCH"

    base_url: str
    timeout: float | None = 10.0
    default_page_size: int = 10
    max_page_size: int = 1000

    def _validate(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("base_url", self.base_url, "must be an http(s) URL")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if self.default_page_size < 1:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be >= 1")
        if self.max_page_size < self.default_page_size:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, "must be >= default_page_size"
            )


__all__ = ["SearchSettings"]
