"""Directory scan configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ScanConfig(BaseModel):
    """Which files the directory walk picks up."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: [".md", ".markdown"], description="Markdown file suffixes")
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: [".git", "node_modules"],
        description="Directory names never descended into",
    )
