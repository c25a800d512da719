"""Tests for turning os-release data into resolver input."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pyinfra.facts.server import OsRelease

from facts import os_facts_from_release
from resolver import OsFacts

RASPBIAN_OS_RELEASE = """\
PRETTY_NAME="Raspbian GNU/Linux 12 (bookworm)"
NAME="Raspbian GNU/Linux"
VERSION_ID="12"
VERSION="12 (bookworm)"
VERSION_CODENAME=bookworm
ID=raspbian
ID_LIKE=debian
HOME_URL="http://www.raspbian.org/"
"""


class TestOsFactsFromRelease:
    def test_raspbian_from_os_release_fact(self):
        release = OsRelease().process(RASPBIAN_OS_RELEASE.splitlines())
        assert os_facts_from_release(release) == OsFacts(
            id="raspbian",
            id_like=("debian",),
            version_codename="bookworm",
            pretty_name="Raspbian GNU/Linux 12 (bookworm)",
        )

    def test_id_like_split_and_lowercased(self):
        facts = os_facts_from_release({"id": "Pop", "id_like": "Ubuntu  Debian"})
        assert facts.id == "pop"
        assert facts.id_like == ("ubuntu", "debian")

    def test_missing_keys(self):
        facts = os_facts_from_release({})
        assert facts == OsFacts(id="", id_like=(), version_codename=None,
                                pretty_name=None)

    def test_empty_codename_is_none(self):
        facts = os_facts_from_release({"id": "debian", "version_codename": ""})
        assert facts.version_codename is None
