from pyinfra import host, logger
from pyinfra.facts.deb import DebArch
from pyinfra.facts.server import LsbRelease, OsRelease

from facts import os_facts_from_release
from resolver import (
    ErrorKind,
    Resolution,
    ResolutionError,
    ResolveOptions,
    gpg_key_url,
    repository_line,
    resolve,
)

TRUE_STRINGS = ("1", "true", "yes", "on")

# lsb_release reports this on Debian testing/sid
NO_CODENAME = "n/a"


def check_server() -> Resolution:
    logger.info("Starting Common Prerequisite Checks")
    release = host.get_fact(OsRelease) or {}
    arch = host.get_fact(DebArch) or ""
    options = resolve_options(host.data)

    try:
        if not release.get("id"):
            raise ResolutionError(
                ErrorKind.UNSUPPORTED_DISTRO,
                "Cannot detect OS (missing or empty /etc/os-release)",
                id="",
                id_like=(),
                pretty_name=None,
            )
        facts = os_facts_from_release(release)
        resolution = resolve(facts, arch, options, codename_lookup=lsb_codename)
    except ResolutionError as e:
        logger.error(f"Docker repository resolution failed ({e.kind.value}): {e}")
        raise

    for warning in resolution.warnings:
        logger.warning(warning)

    descriptor = resolution.descriptor
    logger.info(f"Detected compatible OS: {facts.pretty_name or facts.id}")
    logger.info(
        f"Docker repository: family={descriptor.family.value} "
        f"codename={descriptor.codename} arch={descriptor.architecture}"
    )
    return resolution


def resolve_options(data) -> ResolveOptions:
    force = data.get("force_distro", False)
    if isinstance(force, str):
        force = force.strip().lower() in TRUE_STRINGS
    return ResolveOptions(
        force=bool(force),
        codename_override=data.get("docker_codename") or None,
    )


def lsb_codename():
    lsb_info = host.get_fact(LsbRelease) or {}
    codename = lsb_info.get("codename")
    if codename and codename.strip().lower() == NO_CODENAME:
        return None
    return codename


def log_repository(resolution: Resolution) -> None:
    logger.info("-" * 60)
    logger.info(repository_line(resolution.descriptor))
    logger.info(f"gpg key: {gpg_key_url(resolution.descriptor)}")
    logger.info("-" * 60)
