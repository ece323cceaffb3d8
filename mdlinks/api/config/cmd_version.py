"""Version command - returns mdlinks version information."""

import subprocess
from collections.abc import Iterator
from pathlib import Path

from ...utils.get_package_version import get_package_version
from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult

# Checkout root: mdlinks/api/config/cmd_version.py -> parents[3]
_SOURCE_ROOT = Path(__file__).resolve().parents[3]


def _git_sha() -> str:
    """Short commit of the source checkout, or "" outside a git checkout."""
    try:
        sha = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
            cwd=str(_SOURCE_ROOT),
        )
    except (OSError, subprocess.CalledProcessError):
        return ""
    return sha.decode().strip()


def cmd_version() -> StageResult:
    """Report the installed mdlinks version and, from a checkout, its commit."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading version...")
        version = get_package_version()
        git_sha = _git_sha()
        full_version = f"{version} ({git_sha})" if git_sha else version

        yield (1.0, "Complete")
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.result = f"mdlinks version: {full_version}"
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
