"""Branch deduplication for git-fuzzy.

Merges local branch names and remote-tracking branch names into a single
candidate set, keyed by bare branch name, preferring local branches.

Execution Context:
    Library module - imported by the resolver

Dependencies:
    - gitfuzzy_core.models: Data models

Metadata:
    Version: 0.1.0
    Author: git-fuzzy Team
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from gitfuzzy_core.models import BranchOrigin
from gitfuzzy_core.models import BranchRef
from gitfuzzy_core.models import CandidateSet

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


SYMBOLIC_HEAD = "HEAD"


# ---- Remote Prefix Handling ---------------------------------------------------------------------------------


def split_remote_ref(
        ref: str,
        remotes: Iterable[str] = (),
) -> tuple[str, str] | None:
    """Split a remote-tracking short ref into remote and bare name.

    Known remotes are tried longest first so that remote names containing
    a slash are stripped whole. Unknown prefixes are cut at the first slash.

    Args:
        ref: Short ref such as 'origin/feature-x'.
        remotes: Names of configured remotes.

    Returns:
        Tuple of (remote, bare name), or None when the ref carries no
        branch name (e.g. 'origin', the short form of 'origin/HEAD').
    """
    for remote in sorted(remotes, key=len, reverse=True):
        prefix = f"{remote}/"
        if ref.startswith(prefix):
            remote_name, bare = remote, ref[len(prefix):]
            break
    else:
        remote_name, sep, bare = ref.partition("/")
        if not sep:
            return None

    if not bare or bare == SYMBOLIC_HEAD:
        return None
    return remote_name, bare


def strip_remote_prefix(
        ref: str,
        remotes: Iterable[str] = (),
) -> str | None:
    """Return the bare branch name of a remote-tracking short ref.

    Args:
        ref: Short ref such as 'origin/feature-x'.
        remotes: Names of configured remotes.

    Returns:
        Bare branch name, or None when the ref has none.
    """
    parts = split_remote_ref(ref, remotes)
    return parts[1] if parts else None


# ---- Deduplication ------------------------------------------------------------------------------------------


def deduplicate(
        local_branches: Iterable[str],
        remote_branches: Iterable[str],
        known_remotes: Iterable[str] = (),
) -> CandidateSet:
    """Merge local and remote branch names into one candidate set.

    Every local name is kept and tagged LOCAL. A remote ref is added,
    tagged REMOTE_ONLY, only when no entry with its bare name exists yet,
    so duplicates across several remotes collapse onto the first one seen.

    Args:
        local_branches: Local branch names in discovery order.
        remote_branches: Remote-tracking short refs (e.g. 'origin/dev').
        known_remotes: Configured remote names used to strip prefixes.

    Returns:
        CandidateSet with locals first, then remote-only names in
        first-seen order.
    """
    remotes = tuple(known_remotes)
    by_name: dict[str, BranchRef] = {}

    for name in local_branches:
        if name and name not in by_name:
            by_name[name] = BranchRef(name=name, origin=BranchOrigin.LOCAL)

    collapsed = 0
    for ref in remote_branches:
        parts = split_remote_ref(ref, remotes)
        if parts is None:
            logger.debug("Skipping remote ref without branch name: %s", ref)
            continue
        remote, bare = parts
        if bare in by_name:
            collapsed += 1
            continue
        by_name[bare] = BranchRef(name=bare, origin=BranchOrigin.REMOTE_ONLY, remote=remote)

    logger.debug(
        "Built %d candidates (%d remote refs collapsed onto existing names)",
        len(by_name),
        collapsed,
    )
    # dicts keep insertion order: locals first, then remotes as first seen
    return CandidateSet(by_name.values())
