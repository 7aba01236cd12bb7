"""Per-folder ordering strategies for asset names."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class DefaultOrdering:
    """Keep names in the order they were collected."""

    name = "default"

    def apply(self, names: Iterable[str]) -> list[str]:
        return list(names)


@dataclass(frozen=True)
class NumericTokenOrdering:
    """Sort names like ``<prefix>_<index>[_<suffix>]`` by their integer index."""

    separator: str = "_"
    token_index: int = 1

    name = "numeric-token"

    def sort_key(self, asset: str) -> int:
        parts = asset.split(self.separator)
        try:
            token = parts[self.token_index]
        except IndexError:
            raise ValueError(
                f"Asset name {asset!r} has no index token after "
                f"{self.separator!r}"
            ) from None
        try:
            return int(token)
        except ValueError as exc:
            raise ValueError(
                f"Asset name {asset!r} has non-numeric index token {token!r}"
            ) from exc

    def apply(self, names: Iterable[str]) -> list[str]:
        return sorted(names, key=self.sort_key)


OrderingStrategy = DefaultOrdering | NumericTokenOrdering

NUMERIC_ORDER_FOLDERS: dict[str, OrderingStrategy] = {
    "1_Emojis": NumericTokenOrdering(),
}


def ordering_for_folder(folder_name: str) -> OrderingStrategy:
    """Return the strategy used to order the assets of ``folder_name``."""

    return NUMERIC_ORDER_FOLDERS.get(folder_name, DefaultOrdering())
