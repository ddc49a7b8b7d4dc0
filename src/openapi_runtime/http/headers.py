"""Request headers as a read-only, case-insensitive multimap."""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Header values indexed by lowercase name, decoded once as latin-1.

    Mapping access yields the first value received for a name, which is
    what ``header_parameter`` exposes. ``get_list`` keeps every value in
    arrival order for the cookie parser.
    """

    __slots__ = ("_index",)

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        index: dict[str, list[str]] = {}
        for name, value in raw:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        self._index = {name: tuple(values) for name, values in index.items()}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Headers":
        return cls((name.encode("latin-1"), value.encode("latin-1")) for name, value in pairs)

    def __getitem__(self, key: str) -> str:
        return self._index[key.lower()][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({self._index!r})"

    def get_list(self, key: str) -> list[str]:
        return list(self._index.get(key.lower(), ()))
