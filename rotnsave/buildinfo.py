"""Information about the build and runtime environment, printed at start-up."""

from __future__ import annotations

import os
import platform
import subprocess
from dataclasses import dataclass
from datetime import datetime, timezone

_UNKNOWN = "unknown"


@dataclass(frozen=True)
class BuildInfo:
    """Version control and environment details for this build."""

    git_hash: str
    build_date: str
    target_os: str
    python_version: str
    profile: str

    def banner(self) -> str:
        """Return the multi-line summary printed when the application starts."""
        return (
            f'HASH = "{self.git_hash}",\n'
            f'BUILD_DATE = "{self.build_date}",\n'
            f'TARGET_OS = "{self.target_os}",\n'
            f'PYTHON_VERSION = "{self.python_version}",\n'
            f'PROFILE = "{self.profile}"'
        )


def _git_hash() -> str:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return _UNKNOWN
    return result.stdout.decode("utf-8", errors="replace").strip()


def collect_build_info() -> BuildInfo:
    """Gather the current commit, UTC timestamp, platform and profile."""
    return BuildInfo(
        git_hash=_git_hash(),
        build_date=datetime.now(timezone.utc).isoformat(),
        target_os=platform.system().lower() or _UNKNOWN,
        python_version=platform.python_version() or _UNKNOWN,
        profile=os.environ.get("PROFILE", _UNKNOWN),
    )