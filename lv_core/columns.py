"""Column descriptors for list views.

A `ColumnDescriptor` is the static declaration a view makes about one of its
columns. `ColumnSet` validates a list of them once and turns each into a
`ResolvedColumn`, a capability record whose value extraction is fixed at
construction so the sort and grouping engines never re-inspect optional callables
again.
"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
)

from lv_common.errors import ColumnConfigurationError

T = TypeVar("T")

SortValueFunc = Callable[[T], Any]
GroupSortValueFunc = Callable[[str, Sequence[T]], Any]
RenderFunc = Callable[[T], Any]

_ALIGNMENTS = ("left", "center", "right")


def field_value(row: Any, name: str) -> Any:
    """Return ``row[name]`` for mappings and ``row.name`` otherwise, or None."""
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _row_type_fields(row_type: type) -> set[str] | None:
    if dataclasses.is_dataclass(row_type):
        return {f.name for f in dataclasses.fields(row_type)}
    model_fields = getattr(row_type, "model_fields", None)
    if isinstance(model_fields, dict):
        return set(model_fields)
    try:
        hints = typing.get_type_hints(row_type)
    except Exception:
        hints = getattr(row_type, "__annotations__", {})
    return set(hints) or None


@dataclass(frozen=True)
class ColumnDescriptor(Generic[T]):
    """Static declaration of one table column."""

    key: str
    header: Optional[str] = None
    accessor: Optional[str] = None
    render: Optional[RenderFunc] = None
    sortable: bool = False
    sort_value: Optional[SortValueFunc] = None
    group_sort_value: Optional[GroupSortValueFunc] = None
    align: str = "left"

    @property
    def title(self) -> str:
        return self.header if self.header is not None else self.key


@dataclass(frozen=True)
class ResolvedColumn(Generic[T]):
    """A validated column with its optional behaviours bound once."""

    descriptor: ColumnDescriptor[T]
    value_of: Callable[[T], Any]
    render_cell: Callable[[T], str]
    group_value_of: Optional[GroupSortValueFunc] = None

    @property
    def key(self) -> str:
        return self.descriptor.key

    @property
    def title(self) -> str:
        return self.descriptor.title

    @property
    def sortable(self) -> bool:
        return self.descriptor.sortable

    @property
    def align(self) -> str:
        return self.descriptor.align

    @property
    def has_group_sort_value(self) -> bool:
        return self.group_value_of is not None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _resolve(descriptor: ColumnDescriptor[T]) -> ResolvedColumn[T]:
    if descriptor.sort_value is not None:
        value_of = descriptor.sort_value
    else:
        name = descriptor.accessor or descriptor.key

        def value_of(row: T, _name: str = name) -> Any:
            return field_value(row, _name)

    if descriptor.render is not None:
        render = descriptor.render

        def render_cell(row: T) -> str:
            return _text(render(row))

    elif descriptor.accessor is not None:
        accessor = descriptor.accessor

        def render_cell(row: T) -> str:
            return _text(field_value(row, accessor))

    else:

        def render_cell(row: T) -> str:
            return ""

    return ResolvedColumn(
        descriptor=descriptor,
        value_of=value_of,
        group_value_of=descriptor.group_sort_value,
        render_cell=render_cell,
    )


class ColumnSet(Generic[T]):
    """Ordered, validated collection of columns for one view.

    Construction fails with `ColumnConfigurationError` when keys repeat, a
    capability is not callable, or, when `row_type` is given, a sortable
    column reads a field the row type does not declare.
    """

    def __init__(
        self,
        columns: Sequence[ColumnDescriptor[T]],
        *,
        row_type: type | None = None,
    ) -> None:
        self._row_type = row_type
        self._validate(columns)
        self._columns: List[ResolvedColumn[T]] = [_resolve(c) for c in columns]
        self._by_key: Dict[str, ResolvedColumn[T]] = {c.key: c for c in self._columns}

    def _validate(self, columns: Sequence[ColumnDescriptor[T]]) -> None:
        seen: set[str] = set()
        known_fields = _row_type_fields(self._row_type) if self._row_type else None
        for column in columns:
            context = {"column": column.key}
            if not column.key:
                raise ColumnConfigurationError("Column key must be non-empty", context=context)
            if column.key in seen:
                raise ColumnConfigurationError(
                    f"Duplicate column key '{column.key}'", context=context
                )
            seen.add(column.key)
            if column.align not in _ALIGNMENTS:
                raise ColumnConfigurationError(
                    f"Column '{column.key}' has unknown alignment '{column.align}'",
                    context={**context, "align": column.align},
                )
            for capability in ("render", "sort_value", "group_sort_value"):
                value = getattr(column, capability)
                if value is not None and not callable(value):
                    raise ColumnConfigurationError(
                        f"Column '{column.key}' {capability} must be callable",
                        context={**context, "capability": capability},
                    )
            if column.accessor is not None and not isinstance(column.accessor, str):
                raise ColumnConfigurationError(
                    f"Column '{column.key}' accessor must be a field name",
                    context=context,
                )
            if (
                column.sortable
                and column.sort_value is None
                and known_fields is not None
            ):
                name = column.accessor or column.key
                if name not in known_fields:
                    raise ColumnConfigurationError(
                        f"Sortable column '{column.key}' has no sort value: "
                        f"'{name}' is not a field of {self._row_type.__name__}",
                        context={**context, "field": name},
                    )

    @property
    def row_type(self) -> type | None:
        return self._row_type

    @property
    def headers(self) -> List[str]:
        return [c.title for c in self._columns]

    def get(self, key: str) -> ResolvedColumn[T] | None:
        return self._by_key.get(key)

    def __iter__(self) -> Iterator[ResolvedColumn[T]]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key


def as_column_set(
    columns: "ColumnSet[T] | Sequence[ColumnDescriptor[T]]",
) -> ColumnSet[T]:
    if isinstance(columns, ColumnSet):
        return columns
    return ColumnSet(columns)
