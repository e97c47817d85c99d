"""Header construction for upstream requests."""

from collections.abc import Iterable, Mapping

import httpx

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class HeaderMerger:
    """Merge inbound headers onto a fixed base set.

    Only names already in the base set can be overridden; names that exist
    only in the override are dropped.
    """

    def __init__(self, base: Mapping[str, str] | None = None) -> None:
        self._base = dict(DEFAULT_HEADERS if base is None else base)

    @property
    def base(self) -> dict[str, str]:
        return dict(self._base)

    def merge(
        self,
        override: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> httpx.Headers:
        """Return the base headers with matching override values swapped in."""
        if not override:
            return httpx.Headers(self._base)

        pairs = override.items() if isinstance(override, Mapping) else override
        incoming = httpx.Headers(list(pairs))

        merged: list[tuple[str, str]] = []
        for name, value in self._base.items():
            if name in incoming:
                merged.extend((name, v) for v in incoming.get_list(name))
            else:
                merged.append((name, value))
        return httpx.Headers(merged)
