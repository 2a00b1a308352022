"""
Core package aggregator for upver contracts (grammar, value type, formatting, ordering, aggregation).

## Contracts (single source of truth)
- Grammar — Stage enum, stage tables, EBNF, text matcher.
- Versioning — immutable VersionIdentifier and its factories.
- Formatting — basic, descriptive and compact forms; descriptive inverse parser.
- Comparison — Ordering, compare, newer/older predicates.
- Aggregate — highest/lowest over collections.
- Hashing/Schema/Serde — legacy and stable hashes, pydantic record, canonical JSON.

## Notes
- Zero‑IO policy: stdlib + pydantic only; no file/network IO (the EBNF file next to
  grammar.py is read once at import).
- Naming policy: enum `.value` and record field names are lower_snake.
- Import DAG: errors/constants → grammar → formatting, comparison → versioning →
  aggregate, schema → hashing → serde.

## Downstream usage
- upver.config — settings consumed by callers that choose strictness/sentinel policy.
- upver.cli — command line over parse/format/compare/aggregate.

## Examples
```python
from upver.core.versioning import parse
from upver.core.aggregate import highest

parse("1.0.0.0") > parse("1.0.0.0-beta")  # True
str(highest([parse("1.0"), parse("2.0"), parse("1.5")]))  # '2.0.0.0'
```
"""
