"""Settings the pipeline checks before handling a submission.

``settings.py`` reads these from the environment; the core only sees the
resulting Configuration and reports which required values are empty.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Configuration:
    """Deployment settings required by every pipeline run."""

    store_target: str
    sender_address: str

    def missing(self) -> list[str]:
        """Return the names of required settings that are empty."""

        missing: list[str] = []
        if not (self.store_target or "").strip():
            missing.append("store_target")
        if not (self.sender_address or "").strip():
            missing.append("sender_address")
        return missing
