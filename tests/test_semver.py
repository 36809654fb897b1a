import pytest

from relinstall_core.errors import ParseError
from relinstall_core.semver import SemVerInfo, extract_semver


@pytest.mark.parametrize("major,minor,patch", [
    ("0", "0", "0"),
    ("1", "2", "3"),
    ("10", "0", "7"),
    ("4294967295", "20", "300"),
])
def test_v_prefixed_triples(major, minor, patch):
    info = extract_semver(f"v{major}.{minor}.{patch}")
    assert (info.major, info.minor, info.patch) == (int(major), int(minor), int(patch))
    assert info.pre_release == ""
    assert info.build == ""


def test_bare_version():
    assert extract_semver("1.2.3") == SemVerInfo(1, 2, 3)


def test_release_prefix_is_discarded():
    info = extract_semver("release-v10.20.30")
    assert info == SemVerInfo(10, 20, 30, "", "")
    assert str(info) == "10.20.30"


def test_prerelease_and_build():
    info = extract_semver("1.2.3-alpha.1+001")
    assert info.pre_release == "alpha.1"
    assert info.build == "001"


def test_archive_file_name():
    info = extract_semver("app-1.2.3-beta.2+exp.sha.5114f85.tar.gz")
    assert (info.major, info.minor, info.patch) == (1, 2, 3)
    assert info.pre_release == "beta.2"
    assert info.build == "exp.sha.5114f85"


def test_prefixed_file_name():
    info = extract_semver("myapp-v1.2.3-rc.1+build5.tar.gz")
    assert info == SemVerInfo(1, 2, 3, "rc.1", "build5")


@pytest.mark.parametrize("name", [
    "decred-linux-amd64-v1.5.1.tar.gz",
    "decred-windows-386-v1.5.1.zip",
    "decred-darwin-amd64-v1.5.1.tgz",
])
def test_release_archive_names(name):
    assert extract_semver(name) == SemVerInfo(1, 5, 1)


@pytest.mark.parametrize("value", ["01.2.3", "1.02.3", "v01.2.3", "no-version-here", "1.2", ""])
def test_rejected(value):
    with pytest.raises(ParseError) as exc:
        extract_semver(value)
    assert exc.value.value == value
    assert repr(value) in str(exc.value)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        extract_semver("nothing")


def test_leading_zero_skips_to_later_candidate():
    assert extract_semver("01.2.3 then 4.5.6") == SemVerInfo(4, 5, 6)


def test_first_match_by_position_wins():
    assert extract_semver("tool-2.0.0-bundle-3.1.4") == SemVerInfo(2, 0, 0, "bundle-3.1.4")
    assert extract_semver("a 1.1.1 b 9.9.9") == SemVerInfo(1, 1, 1)


def test_leading_zero_prerelease_identifier_not_matched():
    info = extract_semver("1.2.3-01")
    assert info == SemVerInfo(1, 2, 3)


def test_component_overflow():
    with pytest.raises(ParseError) as exc:
        extract_semver("4294967296.0.0")
    assert isinstance(exc.value.__cause__, OverflowError)


@pytest.mark.parametrize("value", [
    "v1.2.3",
    "release-v0.10.0-rc.2",
    "app-1.2.3-beta.2+exp.sha.5114f85.tar.gz",
    "7.8.9+meta",
])
def test_canonical_round_trip(value):
    info = extract_semver(value)
    again = extract_semver(info.canonical())
    assert (again.major, again.minor, again.patch, again.pre_release) == (
        info.major, info.minor, info.patch, info.pre_release
    )
    assert again.build == ""


def test_canonical_form():
    assert SemVerInfo(1, 2, 3, "rc.1", "build5").canonical() == "v1.2.3-rc.1"
    assert SemVerInfo(1, 2, 3).canonical() == "v1.2.3"
