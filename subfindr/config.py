"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

import os
from typing import List, Literal

from pydantic import BaseModel, Field


class ScanSettings(BaseModel):
    """Tunables for a live scan, read from SUBFINDR_* environment variables"""

    batch_size: int = Field(default=10, gt=0)
    batch_delay: float = Field(default=0.1, ge=0)
    http_timeout: float = Field(default=3.0, gt=0)
    dns_timeout: float = Field(default=3.0, gt=0)
    bruteforce_limit: int = Field(default=150, ge=0)
    bruteforce_max_length: int = Field(default=3, ge=1, le=3)
    dns_backend: Literal["aiodns", "doh"] = "aiodns"
    doh_url: str = "https://dns.google/resolve"
    nameservers: List[str] = Field(default_factory=list)

    @classmethod
    def from_env(cls) -> "ScanSettings":
        """
        Build settings from the environment.

        Unset or blank variables keep their defaults. Invalid values raise
        a pydantic ValidationError.
        """
        values = {}
        for field_name in cls.model_fields:
            raw = os.getenv(f"SUBFINDR_{field_name.upper()}", "").strip()
            if not raw:
                continue
            if field_name == "nameservers":
                values[field_name] = [ns.strip() for ns in raw.split(",") if ns.strip()]
            else:
                values[field_name] = raw
        return cls(**values)
