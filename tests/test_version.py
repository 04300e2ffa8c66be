"""Tests for tintlog._version: PEP 440 compliance and version parsing."""

import re

import tintlog
from tintlog._version import (
    BASE_VERSION,
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION,
    VERSION,
    get_base_version,
    get_pip_version,
)


def test_base_version_format():
    """Base version should be MAJOR.MINOR.PATCH-PHASE."""
    base = get_base_version()
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", base), \
        f"Unexpected base version format: {base}"


def test_base_version_matches_components():
    """Base version should match the MAJOR.MINOR.PATCH constants."""
    base = get_base_version()
    expected_prefix = f"{MAJOR}.{MINOR}.{PATCH}"
    assert base.startswith(expected_prefix), \
        f"Base {base} doesn't start with {expected_prefix}"


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens, proper pre-release)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver, \
        f"PEP 440 forbids hyphens in version: {pip_ver}"
    assert re.match(r"^\d+\.\d+\.\d+", pip_ver), \
        f"PIP version doesn't start with N.N.N: {pip_ver}"


def test_pip_version_alpha_mapping():
    """Alpha phase should map to 'a0' in PEP 440."""
    if PHASE == "alpha":
        assert get_pip_version().endswith("a0")


def test_module_level_constants():
    """Module-level constants should be pre-computed and non-empty."""
    assert VERSION, "VERSION constant is empty"
    assert BASE_VERSION, "BASE_VERSION constant is empty"
    assert PIP_VERSION, "PIP_VERSION constant is empty"


def test_package_exports_version():
    assert tintlog.__version__ == VERSION
    assert tintlog.__app_name__ == "tintlog"
