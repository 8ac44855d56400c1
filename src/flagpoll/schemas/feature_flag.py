from typing import Optional

from pydantic import BaseModel, RootModel

__all__ = ["DEFAULT_FLAG_KEY", "FlagsResponse", "FlagUpdate", "FlagUpdateResponse", "HealthStatus"]

DEFAULT_FLAG_KEY = "feature-flag-1"


class FlagsResponse(RootModel[dict[str, bool]]):
    """Body of ``GET /api/flags``: flag name to enabled state."""

    def get(self, key: str = DEFAULT_FLAG_KEY) -> bool:
        if key not in self.root:
            raise KeyError(f"Flag '{key}' missing from response: {self.root}")
        return self.root[key]


class FlagUpdate(BaseModel):
    state: bool


class FlagUpdateResponse(BaseModel):
    success: bool = True


class HealthStatus(BaseModel):
    status: str = "unknown"
    detail: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
