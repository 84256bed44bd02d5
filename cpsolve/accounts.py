"""Merging of accounts that share an e-mail address."""

from __future__ import annotations

from collections.abc import Sequence

from cpsolve.dsu import DisjointSet


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts sharing an e-mail; each result is a name then sorted e-mails."""
    owner: dict[str, int] = {}
    ds = DisjointSet(len(accounts))
    for index, account in enumerate(accounts):
        for email in account[1:]:
            if email in owner:
                ds.union(index, owner[email])
            else:
                owner[email] = index

    groups: dict[int, list[str]] = {}
    for email, index in owner.items():
        groups.setdefault(ds.find(index), []).append(email)

    return [[accounts[root][0], *sorted(emails)] for root, emails in groups.items()]