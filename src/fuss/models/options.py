"""
App configuration model.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "https://graph.facebook.com"

VERSION_PATTERN = re.compile(r"^v\d+\.\d+$")


class AppOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    version: Optional[str] = None   # default Graph API version, e.g. "v2.0"
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not VERSION_PATTERN.match(value):
            raise ValueError(f"Graph API version must look like v2.0, got {value!r}")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        return value.rstrip("/")
