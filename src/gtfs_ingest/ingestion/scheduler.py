"""
Table read-order scheduling.

Picks tables greedily: each step rescans the unread tables in input order
and takes the first one whose prerequisites have all been read. This is
quadratic in the number of tables, which is fine for a GTFS feed's dozen
or so files; a topological sort would be needed only for far larger sets.
"""

from collections.abc import Collection, Iterator, Mapping, Sequence

from gtfs_ingest.ingestion.errors import SchedulingDeadlock
from gtfs_ingest.utils.naming import normalize_table_name

DependencyGraph = Mapping[str, Collection[str]]


def _normalize_graph(graph: DependencyGraph) -> dict[str, frozenset[str]]:
    return {
        normalize_table_name(table): frozenset(normalize_table_name(p) for p in prereqs)
        for table, prereqs in graph.items()
    }


def iter_schedule(tables: Sequence[str], graph: DependencyGraph) -> Iterator[str]:
    """
    Yield table names in an order that satisfies the dependency graph.

    A table counts as read once the caller resumes the iterator, so the
    caller must finish decoding a yielded table before asking for the next.
    Tables without a graph entry have no prerequisites. Name matching is
    case-insensitive; names are yielded as given.

    Raises:
        SchedulingDeadlock: If a full scan finds no readable table while
            some remain, because of a cycle or an absent prerequisite.
    """
    prerequisites = _normalize_graph(graph)
    read: set[str] = set()
    pending = list(tables)

    while pending:
        for index, name in enumerate(pending):
            required = prerequisites.get(normalize_table_name(name))
            if required is None or required <= read:
                break
        else:
            raise SchedulingDeadlock(list(pending))

        del pending[index]
        yield name
        read.add(normalize_table_name(name))


def schedule(tables: Sequence[str], graph: DependencyGraph) -> list[str]:
    """Return the full read order for ``tables``. See iter_schedule."""
    return list(iter_schedule(tables, graph))
