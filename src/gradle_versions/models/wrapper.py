"""Gradle wrapper models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gradle_versions.models.version import GradleVersion


@dataclass
class WrapperInfo:
    project_dir: Path
    properties_file: Path
    distribution_url: str | None = None
    version: GradleVersion | None = None

    @property
    def found(self) -> bool:
        return self.distribution_url is not None
