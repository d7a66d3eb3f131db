"""Lightweight query result summaries."""

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field

from mythologic.core.ids import MythId


@dataclass(frozen=True)
class QueryResult:
    """One matching entity: just enough to display or look it up again."""

    id: MythId
    name: str
    entity_type: str

    def to_dict(self) -> dict:
        d = asdict(self)
        d["id"] = str(self.id)
        return d


@dataclass
class QueryResultSet:
    """An ordered collection of results, deduplicated by id at construction."""

    results: list[QueryResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen: set[MythId] = set()
        unique = []
        for result in self.results:
            if result.id not in seen:
                seen.add(result.id)
                unique.append(result)
        self.results = unique

    @classmethod
    def empty(cls) -> "QueryResultSet":
        return cls()

    def count(self) -> int:
        return len(self.results)

    def is_empty(self) -> bool:
        return not self.results

    def first(self) -> QueryResult | None:
        return self.results[0] if self.results else None

    def filter_by_type(self, entity_type: str) -> "QueryResultSet":
        """A new set holding only results of ``entity_type``."""
        return QueryResultSet([r for r in self.results if r.entity_type == entity_type])

    def sort_by_name(self) -> None:
        """Sort in place, lexicographically by name."""
        self.results.sort(key=lambda r: r.name)

    def entity_ids(self) -> list[MythId]:
        return [r.id for r in self.results]

    def names(self) -> list[str]:
        return [r.name for r in self.results]

    def to_dicts(self) -> list[dict]:
        return [r.to_dict() for r in self.results]

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[QueryResult]:
        return iter(self.results)
