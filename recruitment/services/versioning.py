"""Version checks for optimistic-locking writes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Unconditional:
    """Write regardless of the stored version."""

    @property
    def expected(self) -> None:
        return None


@dataclass(frozen=True)
class ExpectedVersion:
    """Write only while the stored version still equals ``version``."""

    version: int

    @property
    def expected(self) -> int:
        return self.version


VersionCheck = Unconditional | ExpectedVersion


def version_check(expected_version: int | None) -> VersionCheck:
    """Build a check from an optional version number."""
    if expected_version is None:
        return Unconditional()
    return ExpectedVersion(expected_version)
