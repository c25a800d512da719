from __future__ import annotations

from resolver import OsFacts


def os_facts_from_release(release: dict) -> OsFacts:
    """Build `OsFacts` from pyinfra's `OsRelease` fact (keys lowercased)."""
    return OsFacts(
        id=release.get("id", "").lower(),
        id_like=tuple(release.get("id_like", "").lower().split()),
        version_codename=release.get("version_codename") or None,
        pretty_name=release.get("pretty_name") or None,
    )
