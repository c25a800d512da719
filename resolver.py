"""
Decide which Docker apt repository a Debian-family host should use.

The resolver is a pure function: it takes OS facts gathered elsewhere and
returns a `Resolution`, or raises `ResolutionError`. It never logs and never
touches the host; warnings travel back in the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from constants import DOCKER_CHANNEL, DOCKER_DOWNLOAD_URL, DOCKER_KEYRING

CodenameLookup = Callable[[], Optional[str]]


class Family(str, Enum):
    UBUNTU = "ubuntu"
    DEBIAN = "debian"


class ErrorKind(str, Enum):
    UNSUPPORTED_DISTRO = "unsupported-distro"
    UNDETERMINED_CODENAME = "undetermined-codename"
    INVALID_ARCHITECTURE = "invalid-architecture"


class ResolutionError(Exception):
    def __init__(self, kind: ErrorKind, message: str, **context) -> None:
        super().__init__(message)
        self.kind = kind
        self.context = context


@dataclass(frozen=True)
class OsFacts:
    id: str
    id_like: tuple[str, ...] = ()
    version_codename: Optional[str] = None
    pretty_name: Optional[str] = None


@dataclass(frozen=True)
class ResolveOptions:
    force: bool = False
    codename_override: Optional[str] = None


@dataclass(frozen=True)
class RepositoryDescriptor:
    family: Family
    codename: str
    architecture: str


@dataclass(frozen=True)
class Resolution:
    descriptor: RepositoryDescriptor
    warnings: tuple[str, ...] = field(default=())
    forced: bool = False


def resolve(
    facts: OsFacts,
    arch: str,
    options: ResolveOptions = ResolveOptions(),
    codename_lookup: Optional[CodenameLookup] = None,
) -> Resolution:
    """Resolve the repository family, codename and architecture for a host.

    `codename_lookup` is only called when neither the override nor
    `facts.version_codename` provides a codename.
    """
    if not arch or not arch.strip():
        raise ResolutionError(
            ErrorKind.INVALID_ARCHITECTURE,
            f"Invalid architecture: {arch!r}",
            arch=arch,
        )

    warnings = []
    family = _family_for(facts)
    forced = False
    if family is None:
        if not options.force:
            raise ResolutionError(
                ErrorKind.UNSUPPORTED_DISTRO,
                f"Unsupported OS: {facts.pretty_name or facts.id!r} "
                f"(ID={facts.id!r}, ID_LIKE={' '.join(facts.id_like)!r}). "
                "Only Debian and Ubuntu derivatives are supported.",
                id=facts.id,
                id_like=facts.id_like,
                pretty_name=facts.pretty_name,
            )
        family = Family.DEBIAN
        forced = True
        warnings.append(
            f"Unrecognised OS {facts.id!r}; forcing the Debian repository."
        )

    codename = _codename_for(facts, options, codename_lookup)

    descriptor = RepositoryDescriptor(
        family=family, codename=codename, architecture=arch
    )
    return Resolution(descriptor=descriptor, warnings=tuple(warnings), forced=forced)


def _family_for(facts: OsFacts) -> Optional[Family]:
    if facts.id == "ubuntu":
        return Family.UBUNTU
    if facts.id == "debian":
        return Family.DEBIAN
    if any("ubuntu" in token for token in facts.id_like):
        return Family.UBUNTU
    if any("debian" in token for token in facts.id_like):
        return Family.DEBIAN
    return None


def _codename_for(
    facts: OsFacts,
    options: ResolveOptions,
    codename_lookup: Optional[CodenameLookup],
) -> str:
    if options.codename_override and options.codename_override.strip():
        return options.codename_override
    if facts.version_codename and facts.version_codename.strip():
        return facts.version_codename

    attempted = ["override", "os-release"]
    if codename_lookup is not None:
        attempted.append("lookup")
        codename = codename_lookup()
        if codename and codename.strip():
            return codename

    # Never defaulted, even when forced: an empty suite breaks the apt line.
    raise ResolutionError(
        ErrorKind.UNDETERMINED_CODENAME,
        f"Could not determine the release codename for {facts.id!r} "
        f"(tried: {', '.join(attempted)}).",
        id=facts.id,
        attempted=tuple(attempted),
    )


def repository_url(descriptor: RepositoryDescriptor) -> str:
    return f"{DOCKER_DOWNLOAD_URL}/{descriptor.family.value}"


def gpg_key_url(descriptor: RepositoryDescriptor) -> str:
    return f"{repository_url(descriptor)}/gpg"


def repository_line(
    descriptor: RepositoryDescriptor,
    keyring: str = DOCKER_KEYRING,
    channel: str = DOCKER_CHANNEL,
) -> str:
    return (
        f"deb [arch={descriptor.architecture} signed-by={keyring}] "
        f"{repository_url(descriptor)} {descriptor.codename} {channel}"
    )
