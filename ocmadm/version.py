"""Build version information and the catalogue of OCM version bundles."""

from __future__ import annotations

from dataclasses import dataclass

# Filled in at release time; empty for development builds.
_COMMIT_FROM_GIT = ""
_VERSION_FROM_GIT = ""
_MAJOR_FROM_GIT = ""
_MINOR_FROM_GIT = ""
_BUILD_DATE = ""

_DEFAULT_BUNDLE_VERSION = "0.15.0"


@dataclass(frozen=True)
class VersionInfo:
    """Version details of the running build."""

    major: str = ""
    minor: str = ""
    git_commit: str = ""
    git_version: str = ""
    build_date: str = ""


@dataclass(frozen=True)
class VersionBundle:
    """Image versions of the components that are installed together."""

    ocm: str = ""
    app_addon: str = ""
    policy_addon: str = ""
    multicluster_controlplane: str = ""


_BUNDLES: dict[str, VersionBundle] = {
    "latest": VersionBundle(
        ocm="latest",
        app_addon="latest",
        policy_addon="latest",
        multicluster_controlplane="latest",
    ),
    "0.13.0": VersionBundle(
        ocm="v0.13.0",
        app_addon="v0.13.0",
        policy_addon="v0.13.0",
        multicluster_controlplane="v0.4.0",
    ),
    "0.13.1": VersionBundle(
        ocm="v0.13.1",
        policy_addon="v0.13.0",
        multicluster_controlplane="v0.4.0",
    ),
    "0.13.2": VersionBundle(
        ocm="v0.13.2",
        app_addon="v0.13.0",
        policy_addon="v0.13.0",
        multicluster_controlplane="v0.4.0",
    ),
    "0.13.3": VersionBundle(
        ocm="v0.13.3",
        app_addon="v0.13.0",
        policy_addon="v0.13.0",
        multicluster_controlplane="v0.4.0",
    ),
    "0.14.0": VersionBundle(
        ocm="v0.14.0",
        app_addon="v0.14.0",
        policy_addon="v0.14.0",
        multicluster_controlplane="v0.5.0",
    ),
    "0.15.0": VersionBundle(
        ocm="v0.15.0",
        app_addon="v0.15.0",
        policy_addon="v0.15.0",
        multicluster_controlplane="v0.6.0",
    ),
}
_BUNDLES["default"] = _BUNDLES[_DEFAULT_BUNDLE_VERSION]


def get() -> VersionInfo:
    """Return the version of the code this build was made from."""
    return VersionInfo(
        major=_MAJOR_FROM_GIT,
        minor=_MINOR_FROM_GIT,
        git_commit=_COMMIT_FROM_GIT,
        git_version=_VERSION_FROM_GIT,
        build_date=_BUILD_DATE,
    )


def get_default_bundle_version() -> str:
    """Return the bundle version used when none is requested."""
    return _DEFAULT_BUNDLE_VERSION


def get_version_bundle(version: str) -> VersionBundle:
    """Look up a bundle by "x.y.z", "vx.y.z", "latest" or "default".

    Raises ValueError for an unknown version.
    """
    version = version.removeprefix("v")
    try:
        return _BUNDLES[version]
    except KeyError:
        raise ValueError(
            f"couldn't find the requested version bundle: {version}"
        ) from None