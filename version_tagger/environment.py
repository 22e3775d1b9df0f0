"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os

from .config import DEFAULT_REMOTE_NAME, MAX_PRE_VERSION_COUNT
from .models import RunMode


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    mode: RunMode = RunMode.TAG
    remote_name: str = DEFAULT_REMOTE_NAME
    dry_run: bool = False
    max_attempts: int = MAX_PRE_VERSION_COUNT
    target_path: str = "."
    github_output: Optional[str] = None
    _max_attempts_error: Optional[str] = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls, env: Dict[str, str], mode: RunMode = RunMode.TAG) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)
            mode: Run mode selected on the command line

        Returns:
            EnvironmentConfig instance
        """
        # Parse the counter bound, errors are reported by validate()
        max_attempts = MAX_PRE_VERSION_COUNT
        max_attempts_error = None
        if max_attempts_str := env.get("MAX_PRE_VERSION_COUNT", "").strip():
            try:
                max_attempts = int(max_attempts_str)
            except ValueError:
                max_attempts_error = max_attempts_str

        config = cls(
            mode=mode,
            remote_name=env.get("GIT_REMOTE_NAME", DEFAULT_REMOTE_NAME).strip(),
            dry_run=env.get("DRY_RUN", "false").lower() == "true",
            max_attempts=max_attempts,
            target_path=env.get("TARGET_PATH", ".") or ".",
            github_output=env.get("GITHUB_OUTPUT") or None,
        )
        config._max_attempts_error = max_attempts_error
        return config

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.remote_name:
            errors.append("GIT_REMOTE_NAME cannot be empty")

        if self._max_attempts_error is not None:
            errors.append(f"MAX_PRE_VERSION_COUNT must be an integer, got '{self._max_attempts_error}'")
        elif self.max_attempts < 1:
            errors.append(f"MAX_PRE_VERSION_COUNT must be positive, got {self.max_attempts}")

        if not os.path.isdir(self.target_path):
            errors.append(f"TARGET_PATH '{self.target_path}' is not a directory")

        return errors
