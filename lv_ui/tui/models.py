from dataclasses import dataclass, field


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]
    caption: str = ""
    group_header_rows: list[int] = field(default_factory=list)  # indexes into rows
