#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/context.py
"""Traversal state threaded through a render call.

The exporter walks the block tree depth first. Everything that depends on
where a block sits in that walk (its depth, the variant of the block
rendered just before it, the table it belongs to) lives in a
``RenderContext`` owned by a single render call. Descending into children
works on a copy, so siblings never observe state changed inside a subtree
and independent render calls never share state.

"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Optional

from notion2md.models import Block, BlockType, Page, TablePayload
from notion2md.options.render import RenderOptions


@dataclass(frozen=True)
class StyledBlock:
    """A block ready for a renderer operation.

    Parameters
    ----------
    text : str
        The block's rich text, already rendered with styling
    block : Block
        The source block
    options : RenderOptions
        Options of the current render call
    depth : int, default 0
        Nesting depth of the block (0 at the page root)
    page : Page or None, default None
        The page being rendered

    """

    text: str
    block: Block
    options: RenderOptions = field(default_factory=RenderOptions)
    depth: int = 0
    page: Optional[Page] = None


@dataclass
class TableState:
    """Row bookkeeping for the table currently being rendered.

    A table scope starts when a ``table`` block is reached; its rows are the
    table's children. ``current_row`` counts rows rendered so far.
    """

    table: TablePayload
    current_row: int = 0

    @property
    def has_row_header(self) -> bool:
        return self.table.has_row_header

    @property
    def has_column_header(self) -> bool:
        return self.table.has_column_header

    def advance(self) -> None:
        """Mark the current row as rendered."""
        self.current_row += 1


@dataclass(frozen=True)
class TableCell:
    """One rendered cell handed to a table row renderer.

    Parameters
    ----------
    text : str
        Styled cell text
    is_row_header : bool
        The table declares row headers and this cell is in the first row
    is_column_header : bool
        The table declares column headers and this is the first cell of its row
    row_index : int
        Zero-based index of the row within its table
    column_index : int
        Zero-based position of the cell within the row
    table : TablePayload
        Header flags and width of the enclosing table
    row : Block or None
        The source table row block

    """

    text: str
    is_row_header: bool
    is_column_header: bool
    row_index: int
    column_index: int
    table: TablePayload
    row: Optional[Block] = None


def build_table_cells(row: Block, texts: list[str], state: TableState) -> list[TableCell]:
    """Attach header metadata to the rendered cells of one row.

    Parameters
    ----------
    row : Block
        The ``table_row`` block
    texts : list of str
        Rendered text of each cell, in order
    state : TableState
        State of the enclosing table

    Returns
    -------
    list of TableCell
        One entry per cell

    """
    row_header = state.has_row_header and state.current_row == 0
    return [
        TableCell(
            text=text,
            is_row_header=row_header,
            is_column_header=state.has_column_header and index == 0,
            row_index=state.current_row,
            column_index=index,
            table=state.table,
            row=row,
        )
        for index, text in enumerate(texts)
    ]


@dataclass
class RenderContext:
    """Mutable traversal state for one sibling run.

    Parameters
    ----------
    options : RenderOptions
        Options of the render call
    page : Page or None
        The page being rendered
    depth : int, default 0
        Depth of the blocks in this run
    previous_type : str, default ""
        Variant tag of the block emitted just before the next one
    table_state : TableState or None
        The active table scope, if any

    """

    options: RenderOptions = field(default_factory=RenderOptions)
    page: Optional[Page] = None
    depth: int = 0
    previous_type: str = ""
    table_state: Optional[TableState] = None

    def start_table(self, table: TablePayload) -> TableState:
        """Open a new table scope, resetting the row counter."""
        self.table_state = TableState(table=table)
        return self.table_state

    def child(self, parent: Block) -> RenderContext:
        """Return the context for the children of ``parent``.

        Depth grows by one, except for the rows of a table which share the
        table's depth. The table state is copied so rows counted inside the
        subtree do not leak back into this context.
        """
        depth = self.depth if parent.block_type is BlockType.TABLE else self.depth + 1
        return replace(self, depth=depth, table_state=copy.copy(self.table_state))
