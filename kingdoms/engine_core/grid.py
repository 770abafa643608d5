"""
Hex Grid - Axial coordinates, board generation and capital placement.

Pure functions, no state. Boards are tuples of Hex and are never
modified in place: every edit returns a new board.

Board layout (rows are r, columns are q):
- rows [0, player_rows)                    -> zone A
- rows [player_rows, player_rows + 2)      -> neutral borderlands
- rows [player_rows + 2, height)           -> zone B
where player_rows = (height - 2) // 2.
"""

from __future__ import annotations
import logging
from typing import Iterable, TYPE_CHECKING

from .config import CapitalPlacementPolicy
from .errors import CapitalPlacementError
from .state import Hex, Player, Zone, zone_of

if TYPE_CHECKING:
    from .config import RulesConfig

logger = logging.getLogger(__name__)

# 6 directions: (1,0), (1,-1), (0,-1), (-1,0), (-1,1), (0,1)
AXIAL_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),   # east
    (1, -1),  # northeast
    (0, -1),  # northwest
    (-1, 0),  # west
    (-1, 1),  # southwest
    (0, 1),   # southeast
)

BORDERLAND_ROWS = 2

Board = tuple[Hex, ...]


def player_rows(height: int) -> int:
    """Rows of territory each player gets on a board of this height."""
    return (height - BORDERLAND_ROWS) // 2


def zone_for_row(r: int, height: int) -> Zone:
    rows = player_rows(height)
    if r < rows:
        return Zone.A
    if r < rows + BORDERLAND_ROWS:
        return Zone.NEUTRAL
    return Zone.B


def generate_board(width: int, height: int) -> Board:
    """
    Generate a width x height board partitioned into zone bands.

    Args:
        width: Number of columns (q)
        height: Number of rows (r), including the 2 borderland rows

    Returns:
        Tuple of Hex, one per (q, r), row-major
    """
    if width <= 0:
        raise ValueError(f"Board width must be positive, got {width}")
    if height < BORDERLAND_ROWS:
        raise ValueError(f"Board height must be at least {BORDERLAND_ROWS}, got {height}")

    return tuple(
        Hex(q=q, r=r, zone=zone_for_row(r, height))
        for r in range(height)
        for q in range(width)
    )


def default_board(config: RulesConfig) -> Board:
    """The board a new game is played on."""
    return generate_board(config.board_width, config.board_height)


def get_adjacent_hexes(q: int, r: int) -> list[tuple[int, int]]:
    """
    Get the 6 neighboring coordinates in the axial system.

    May include off-board coordinates; callers filter against the board.
    """
    return [(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def is_adjacent(current: tuple[int, int], target: tuple[int, int]) -> bool:
    """Check if target is one of the 6 axial neighbours of current."""
    return (target[0] - current[0], target[1] - current[1]) in AXIAL_DIRECTIONS


def hex_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Distance between two cells in axial coordinates."""
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return max(abs(dq), abs(dr), abs(dq + dr))


def find_hex_by_coordinates(board: Iterable[Hex], q: int, r: int) -> Hex | None:
    for hex_ in board:
        if hex_.q == q and hex_.r == r:
            return hex_
    return None


def neighbours_on_board(board: Board, q: int, r: int) -> list[Hex]:
    """Adjacent hexes that actually exist on the board."""
    coords = set(get_adjacent_hexes(q, r))
    return [h for h in board if h.coords in coords]


def place_capital(
    board: Board,
    owner: Player,
    q: int,
    r: int,
    policy: CapitalPlacementPolicy = CapitalPlacementPolicy.WARN,
) -> Board:
    """
    Mark the hex at (q, r) and its on-board neighbours as owner's capital.

    A missing centre hex leaves the board unchanged. A centre outside the
    owner's zone is placed anyway under WARN and raises
    CapitalPlacementError under REJECT.

    Returns:
        New board with the 7-hex capital cluster marked
    """
    centre = find_hex_by_coordinates(board, q, r)
    if centre is None:
        logger.error("Cannot place capital: no hex at (%d, %d)", q, r)
        return board

    if centre.zone is not zone_of(owner):
        if policy is CapitalPlacementPolicy.REJECT:
            raise CapitalPlacementError(
                f"Capital at ({q}, {r}) is outside player {owner.value}'s territory"
            )
        logger.warning(
            "Placing capital at (%d, %d) is outside player %s's territory", q, r, owner.value
        )

    cluster = {(q, r), *get_adjacent_hexes(q, r)}
    new_board = tuple(
        Hex(
            q=h.q,
            r=h.r,
            zone=h.zone,
            capital_owner=owner,
            generate_resource=h.generate_resource,
        ) if h.coords in cluster else h
        for h in board
    )
    logger.info("Placed capital for %s at (%d, %d)", owner.value, q, r)
    return new_board


def toggle_resource_generation(board: Board, q: int, r: int) -> Board:
    """Flip generate_resource on a capital hex; no-op for any other hex."""
    target = find_hex_by_coordinates(board, q, r)
    if target is None or target.capital_owner is None:
        logger.debug("Hex (%d, %d) is not part of a capital; not toggling", q, r)
        return board

    return tuple(
        Hex(
            q=h.q,
            r=h.r,
            zone=h.zone,
            capital_owner=h.capital_owner,
            generate_resource=not h.generate_resource,
        ) if h is target else h
        for h in board
    )


def capital_hexes(board: Iterable[Hex], owner: Player) -> list[Hex]:
    return [h for h in board if h.is_capital_of(owner)]


def has_capital(board: Iterable[Hex], owner: Player) -> bool:
    return any(h.is_capital_of(owner) for h in board)
