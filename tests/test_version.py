import pytest

from ocmadm import version
from ocmadm.version import VersionBundle, VersionInfo


def test_get_returns_build_info():
    info = version.get()
    assert info == VersionInfo()


def test_default_bundle_version():
    assert version.get_default_bundle_version() == "0.15.0"


def test_default_alias_matches_default_version():
    default = version.get_version_bundle("default")
    assert default == version.get_version_bundle(version.get_default_bundle_version())


def test_latest_bundle():
    assert version.get_version_bundle("latest") == VersionBundle(
        ocm="latest",
        app_addon="latest",
        policy_addon="latest",
        multicluster_controlplane="latest",
    )


def test_known_bundle_values():
    bundle = version.get_version_bundle("0.14.0")
    assert bundle.ocm == "v0.14.0"
    assert bundle.app_addon == "v0.14.0"
    assert bundle.policy_addon == "v0.14.0"
    assert bundle.multicluster_controlplane == "v0.5.0"


def test_bundle_without_app_addon():
    bundle = version.get_version_bundle("0.13.1")
    assert bundle.ocm == "v0.13.1"
    assert bundle.app_addon == ""
    assert bundle.multicluster_controlplane == "v0.4.0"


@pytest.mark.parametrize(
    "name", ["0.13.0", "0.13.1", "0.13.2", "0.13.3", "0.14.0", "0.15.0"]
)
def test_v_prefix_is_accepted(name):
    plain = version.get_version_bundle(name)
    assert version.get_version_bundle("v" + name) == plain
    assert plain.ocm == "v" + name


def test_unknown_version_raises():
    with pytest.raises(ValueError, match="couldn't find the requested version bundle: 9.9.9"):
        version.get_version_bundle("v9.9.9")


def test_only_one_prefix_is_stripped():
    with pytest.raises(ValueError):
        version.get_version_bundle("vv0.15.0")