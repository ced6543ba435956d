"""Read the Gradle distribution a project pins through its wrapper."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from gradle_versions.models.version import GradleVersion
from gradle_versions.models.wrapper import WrapperInfo
from gradle_versions.utils.properties import load_properties

logger = logging.getLogger(__name__)

DISTRIBUTION_URL_KEY = "distributionUrl"

# e.g. .../distributions/gradle-8.2.1-bin.zip or .../distributions-snapshots/gradle-8.3-20230601000000+0000-all.zip
_DISTRIBUTION_PATTERN = re.compile(r"gradle-(?P<version>[^/]+?)-(?:bin|all)\.zip$")


def wrapper_properties_path(project_dir: Path) -> Path:
    return project_dir / "gradle" / "wrapper" / "gradle-wrapper.properties"


def distribution_url_from_wrapper(project_dir: Path) -> str | None:
    """Return the unescaped ``distributionUrl`` of a project's wrapper, or None."""
    properties_file = wrapper_properties_path(project_dir)
    try:
        text = properties_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("No readable wrapper properties at %s", properties_file, exc_info=True)
        return None

    url = load_properties(text).get(DISTRIBUTION_URL_KEY)
    if url is None:
        return None
    return url.strip()


def version_from_distribution_url(url: str) -> GradleVersion | None:
    """Extract the Gradle version embedded in a distribution URL.

    Returns None when the URL does not name a gradle-<version>-bin/all.zip
    archive. A matching but invalid version token raises VersionParseError.
    """
    match = _DISTRIBUTION_PATTERN.search(url.split("?", 1)[0])
    if match is None:
        return None
    return GradleVersion(match.group("version"))


def inspect_wrapper(project_dir: Path) -> WrapperInfo:
    """Collect the wrapper distribution URL and its version for ``project_dir``."""
    info = WrapperInfo(project_dir=project_dir, properties_file=wrapper_properties_path(project_dir))
    info.distribution_url = distribution_url_from_wrapper(project_dir)
    if info.distribution_url:
        logger.debug("Wrapper of %s uses distribution %s", project_dir, info.distribution_url)
        info.version = version_from_distribution_url(info.distribution_url)
    return info
