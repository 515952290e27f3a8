"""Batch record reader shared by the CLI frontends.

Input layout::

    <number of queries>
    <initial> <goal>
    <cost vector>
    <initial> <goal>
    <cost vector>
    ...

Blank lines before an ``<initial> <goal>`` line are skipped.  The cost
line is taken verbatim; its validation belongs to the cost model.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from backend.errors import InputFormatError


@dataclass(frozen=True)
class Query:
    initial: str
    goal: str
    cost_line: str


# -- low-level line readers ----------------------------------------------------


def _next_filled(lines: Iterator[tuple[int, str]]) -> tuple[int, str] | None:
    for number, line in lines:
        if line.strip():
            return number, line
    return None


def _read_count(lines: Iterator[tuple[int, str]]) -> int:
    first = _next_filled(lines)
    if first is None:
        raise InputFormatError("Input is empty; expected a query count.")
    number, line = first
    try:
        count = int(line.strip())
    except ValueError as exc:
        raise InputFormatError(
            f"Line {number}: expected a query count, got {line.strip()!r}."
        ) from exc
    if count < 0:
        raise InputFormatError(f"Line {number}: query count must not be negative.")
    return count


# -- public API ----------------------------------------------------------------


def read_queries(source: Iterable[str]) -> Iterator[Query]:
    """Yield the queries of a batch, lazily, in input order.

    Raises ``InputFormatError`` when the count line is bad or the input
    runs out before the announced number of queries.
    """
    lines = enumerate((line.rstrip("\r\n") for line in source), start=1)
    count = _read_count(lines)

    for index in range(count):
        header = _next_filled(lines)
        if header is None:
            raise InputFormatError(
                f"Expected {count} queries, input ended after {index}."
            )
        number, line = header
        tokens = line.split()
        if len(tokens) < 2:
            raise InputFormatError(
                f"Line {number}: expected '<initial> <goal>', got {line!r}."
            )

        cost = next(lines, None)
        if cost is None:
            raise InputFormatError(
                f"Line {number}: query {index + 1} has no cost line."
            )
        yield Query(initial=tokens[0], goal=tokens[1], cost_line=cost[1])


def format_queries(queries: Iterable[Query]) -> str:
    """Render queries back into the batch layout."""
    queries = list(queries)
    out = [str(len(queries))]
    for q in queries:
        out.append(f"{q.initial} {q.goal}")
        out.append(q.cost_line)
    return "\n".join(out) + "\n"
