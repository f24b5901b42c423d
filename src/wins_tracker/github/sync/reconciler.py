"""Upsert of freshly fetched PRs into the cached PR collection."""

from wins_tracker.schemas.entries import PrEntry

from .enums import ReconcileAction


def reconcile(collection: list[PrEntry], entry: PrEntry) -> ReconcileAction:
    """Insert or replace ``entry`` in ``collection`` by PR id.

    An existing entry with the same id is overwritten wholesale (GitHub owns
    every field), otherwise the entry is appended. The collection is
    mutated in place.

    Args:
        collection: Cached PR entries (at most one per id)
        entry: Entry built from the latest GitHub data

    Returns:
        ReconcileAction.UPDATED if an entry was replaced, else ReconcileAction.ADDED
    """
    for index, existing in enumerate(collection):
        if existing.id == entry.id:
            collection[index] = entry
            return ReconcileAction.UPDATED
    collection.append(entry)
    return ReconcileAction.ADDED


def sort_by_merged_desc(collection: list[PrEntry]) -> None:
    """Sort in place, most recently merged first (stable for equal timestamps)."""
    collection.sort(key=lambda pr: pr.merged_at, reverse=True)
