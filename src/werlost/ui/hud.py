from typing import List

from ..engine.movement import Direction, ResolvedView
from ..engine.player import PlayerState
from ..tiles import INTERSECTION_LABEL

FACING_NAMES = {
    Direction.NORTH: "北",
    Direction.EAST: "東",
    Direction.SOUTH: "南",
    Direction.WEST: "西",
}


def view_lines(view: ResolvedView) -> List[str]:
    """
    Four-cell view as the player panel prints it: far row on top,
    left column first, then the player's own spot.
    """
    return [
        f"左遠 {view.left_far} | 右遠 {view.right_far}",
        f"左近 {view.left_near} | 右近 {view.right_near}",
        f"現在位置 {INTERSECTION_LABEL}",
    ]


def player_line(player: PlayerState) -> str:
    facing = "-" if player.idle else FACING_NAMES[player.facing]
    return f"玩家 {player.role} ({player.ix}, {player.iy}) 面向 {facing}"
