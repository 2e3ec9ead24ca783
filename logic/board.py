"""
Board types for TicTacToe.
Marks, positions and an immutable 3x3 board snapshot.
"""

from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import InvalidPositionError


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = " "
    X = "X"
    O = "O"

    @property
    def symbol(self) -> str:
        return self.value

    def opposite(self) -> "Mark":
        """Get the opposing player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite")


# Characters accepted by Board.from_rows
_CHAR_TO_MARK = {
    "X": Mark.X,
    "O": Mark.O,
    " ": Mark.EMPTY,
    ".": Mark.EMPTY,
    "-": Mark.EMPTY,
}


def _is_coordinate(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Position:
    """
    A cell on the board.

    Both row and column must be in 0-2, otherwise
    InvalidPositionError is raised.
    """
    row: int
    column: int

    def __post_init__(self):
        size = GameConfig.BOARD_SIZE
        for name, value in (("row", self.row), ("column", self.column)):
            if not _is_coordinate(value) or not 0 <= value < size:
                raise InvalidPositionError(
                    f"Invalid {name} {value!r}. Must be 0-{size - 1}."
                )

    @property
    def index(self) -> int:
        """Row-major index (0-8)."""
        return self.row * GameConfig.BOARD_SIZE + self.column

    @classmethod
    def from_index(cls, index: int) -> "Position":
        if not _is_coordinate(index) or not 0 <= index < GameConfig.CELL_COUNT:
            raise InvalidPositionError(
                f"Invalid index {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )
        row, column = divmod(index, GameConfig.BOARD_SIZE)
        return cls(row, column)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.column)

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


# All 9 positions, row-major
_ALL_POSITIONS = tuple(Position.from_index(i) for i in range(GameConfig.CELL_COUNT))


@dataclass(frozen=True)
class Board:
    """
    Immutable 3x3 TicTacToe board.

    Cells are stored row-major as a tuple of 9 Marks. Every change
    returns a new Board, so a board handed to the AI or the rules
    can never be modified behind the caller's back.
    """

    cells: Tuple[Mark, ...] = field(
        default_factory=lambda: (Mark.EMPTY,) * GameConfig.CELL_COUNT
    )

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Board needs {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )
        for cell in cells:
            if not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value {cell!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Union[str, Mark]]]) -> "Board":
        """
        Build a board from three rows.

        Args:
            rows: e.g. ["XO.", " X ", "..O"]. Each cell is "X", "O",
                one of " ", ".", "-" for empty, or a Mark.

        Returns:
            The new Board.
        """
        rows = list(rows)
        if len(rows) != GameConfig.BOARD_SIZE:
            raise ValueError(f"Board needs {GameConfig.BOARD_SIZE} rows, got {len(rows)}")

        cells = []
        for row in rows:
            if len(row) != GameConfig.BOARD_SIZE:
                raise ValueError(f"Row {row!r} must have {GameConfig.BOARD_SIZE} cells")
            for cell in row:
                if isinstance(cell, Mark):
                    cells.append(cell)
                elif isinstance(cell, str) and cell.upper() in _CHAR_TO_MARK:
                    cells.append(_CHAR_TO_MARK[cell.upper()])
                else:
                    raise ValueError(f"Invalid cell value {cell!r}")
        return cls(tuple(cells))

    def __getitem__(self, position: Union[Position, Tuple[int, int]]) -> Mark:
        if not isinstance(position, Position):
            position = Position(*position)
        return self.cells[position.index]

    def place(self, position: Position, mark: Mark) -> "Board":
        """Return a copy of this board with one cell replaced."""
        cells = list(self.cells)
        cells[position.index] = mark
        return Board(tuple(cells))

    def empty_cells(self) -> List[Position]:
        """Empty positions in row-major order."""
        return [
            _ALL_POSITIONS[i]
            for i, cell in enumerate(self.cells)
            if cell is Mark.EMPTY
        ]

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def is_empty(self) -> bool:
        return self.count(Mark.EMPTY) == GameConfig.CELL_COUNT

    def rows(self) -> List[List[Mark]]:
        """The board as a fresh list of 3 rows."""
        size = GameConfig.BOARD_SIZE
        return [list(self.cells[r * size:(r + 1) * size]) for r in range(size)]

    def __str__(self) -> str:
        return "\n".join(
            "".join("." if cell is Mark.EMPTY else cell.symbol for cell in row)
            for row in self.rows()
        )
