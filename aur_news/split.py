"""Partition package names between the sync repositories and the AUR."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

AUR_REPO = "aur"


class Mode(enum.Enum):
    """Where targets should be looked up."""

    AUR = "aur"
    REPO = "repo"
    ANY = "any"

    @classmethod
    def from_str(cls, value: str) -> "Mode":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported mode: {value}") from None

    def is_aur(self) -> bool:
        return self is Mode.AUR

    def is_repo(self) -> bool:
        return self is Mode.REPO

    def is_any(self) -> bool:
        return self is Mode.ANY


@dataclass(frozen=True)
class SyncDb:
    """Package, provider and group names known to one sync database."""

    name: str
    packages: FrozenSet[str] = field(default_factory=frozenset)
    provides: FrozenSet[str] = field(default_factory=frozenset)
    groups: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for attr in ("packages", "provides", "groups"):
            object.__setattr__(self, attr, frozenset(getattr(self, attr)))

    def has_package(self, name: str) -> bool:
        return name in self.packages

    def satisfies(self, name: str) -> bool:
        return name in self.packages or name in self.provides

    def has_group(self, name: str) -> bool:
        return name in self.groups


@dataclass(frozen=True)
class Target:
    """A package target, optionally qualified as ``repo/pkg``."""

    pkg: str
    repo: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "Target":
        repo, sep, pkg = value.partition("/")
        if not sep:
            return cls(pkg=value)
        return cls(pkg=pkg, repo=repo)

    def __str__(self) -> str:
        return f"{self.repo}/{self.pkg}" if self.repo else self.pkg


def split_repo_aur_pkgs(
    dbs: Sequence[SyncDb], pkgs: Iterable[str]
) -> Tuple[List[str], List[str]]:
    """Split package names by whether a sync database contains them.

    Returns ``(repo_pkgs, aur_pkgs)``; anything not found in a sync database
    is assumed to come from the AUR.
    """
    repo: List[str] = []
    aur: List[str] = []
    for pkg in pkgs:
        if any(db.has_package(pkg) for db in dbs):
            repo.append(pkg)
        else:
            aur.append(pkg)
    return repo, aur


def split_repo_aur_mode(
    dbs: Sequence[SyncDb], mode: Mode, pkgs: Iterable[str]
) -> Tuple[List[str], List[str]]:
    """Like :func:`split_repo_aur_pkgs`, but ``mode`` can force one side."""
    if mode is Mode.AUR:
        return [], list(pkgs)
    if mode is Mode.REPO:
        return list(pkgs), []
    return split_repo_aur_pkgs(dbs, pkgs)


def split_repo_aur_targets(
    dbs: Sequence[SyncDb], mode: Mode, targets: Iterable[str]
) -> Tuple[List[Target], List[Target]]:
    """Split ``repo/pkg`` targets, honouring providers and groups.

    An explicit ``aur/`` prefix always lands on the AUR side and any other
    explicit repository on the repo side.
    """
    parsed = [Target.parse(target) for target in targets]
    if mode is Mode.AUR:
        return [], parsed
    if mode is Mode.REPO:
        return parsed, []

    repo: List[Target] = []
    aur: List[Target] = []
    for target in parsed:
        if target.repo is not None:
            (aur if target.repo == AUR_REPO else repo).append(target)
        elif any(db.satisfies(target.pkg) or db.has_group(target.pkg) for db in dbs):
            repo.append(target)
        else:
            aur.append(target)
    return repo, aur
