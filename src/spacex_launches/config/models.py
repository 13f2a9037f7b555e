"""Pydantic configuration models for the launch client and list."""

from pydantic import BaseModel, Field

# ============================================================
# Client Configs
# ============================================================


class TimeoutConfig(BaseModel):
    """Per-request timeouts in seconds."""

    search: float = Field(default=15.0, gt=0)
    list: float = Field(default=10.0, gt=0)
    fallback: float = Field(default=10.0, gt=0)
    launchpad: float = Field(default=10.0, gt=0)
    health: float = Field(default=5.0, gt=0)

    model_config = {"frozen": True}


class ClientConfig(BaseModel):
    """Configuration for SpaceXClient.

    ``base_url`` of None defers to the SPACEX_API_BASE env var.
    """

    base_url: str | None = None
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)

    model_config = {"frozen": True}


# ============================================================
# List Config
# ============================================================


class ListConfig(BaseModel):
    """Configuration for LaunchListController and search input."""

    page_size: int = Field(default=20, gt=0)
    search_debounce_seconds: float = Field(default=0.5, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class LaunchTrackerConfig(BaseModel):
    """Root configuration."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    list: ListConfig = Field(default_factory=ListConfig)

    model_config = {"frozen": True}
