"""Feature availability by minimum Gradle version."""

from __future__ import annotations

import enum

from gradle_versions.models.version import GradleVersion, compare_versions


class Capability(enum.Enum):
    COMPOSITE_BUILDS = "composite builds"
    DASH_DASH_SCAN = "--scan"
    SYNC_TASKS_IN_ECLIPSE_PLUGIN_CONFIG = "sync tasks in eclipse plugin config"
    SENDING_RESERVED_PROJECTS = "sending reserved projects"
    TEST_ATTRIBUTES = "test attributes"
    CLOSED_PROJECT_DEPENDENCY_SUBSTITUTION = "closed project dependency substitution"
    TEST_DEBUGGING = "test debugging"
    TASK_EXECUTION_IN_INCLUDED_BUILD = "task execution in included build"


MINIMUM_VERSIONS: dict[Capability, str] = {
    Capability.COMPOSITE_BUILDS: "3.3",
    Capability.DASH_DASH_SCAN: "3.5",
    Capability.SYNC_TASKS_IN_ECLIPSE_PLUGIN_CONFIG: "5.4",
    Capability.SENDING_RESERVED_PROJECTS: "5.5",
    Capability.TEST_ATTRIBUTES: "5.6",
    Capability.CLOSED_PROJECT_DEPENDENCY_SUBSTITUTION: "5.6",
    Capability.TEST_DEBUGGING: "5.6",
    Capability.TASK_EXECUTION_IN_INCLUDED_BUILD: "6.8",
}


def minimum_version(capability: Capability | str) -> GradleVersion:
    """Return the first Gradle release providing ``capability``.

    Accepts the enum member or its name as shown to users ("composite builds").
    Raises ValueError for unknown names.
    """
    return GradleVersion(MINIMUM_VERSIONS[Capability(capability)])


def supports(capability: Capability | str, version: GradleVersion) -> bool:
    """True when the base version of ``version`` is at least the capability's minimum.

    Pre-releases count as their target release, so 4.0-rc-1 supports
    everything 4.0 does.
    """
    return compare_versions(version.base_version, minimum_version(capability)) >= 0


def capability_report(version: GradleVersion) -> dict[Capability, bool]:
    """Evaluate every known capability for ``version``."""
    return {cap: supports(cap, version) for cap in Capability}
