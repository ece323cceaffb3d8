"""Reachability check configuration."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; mdlinks/1.0)"
DEFAULT_FORCE_VALID_PATTERNS = [
    # GitHub asset links answer 403 to scripts but work in browsers
    r"github\.com/.*/assets/",
    r"marketplace\.visualstudio\.com",
]


class CheckConfig(BaseModel):
    """Settings for probing absolute URLs."""

    model_config = ConfigDict(extra="forbid")

    concurrency_limit: int = Field(20, gt=0, description="Markdown files checked at the same time")
    link_batch_size: int = Field(5, gt=0, description="URLs probed at the same time within one file")
    timeout: float = Field(10.0, gt=0, description="Seconds to wait for each HTTP request")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent with probes")
    skip_localhost: bool = Field(True, description="Report localhost URLs as skipped instead of probing them")
    force_valid_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FORCE_VALID_PATTERNS),
        description="Regular expressions for URLs that are always considered valid",
    )
