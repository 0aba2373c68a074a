# Cell states and the fixed display strings every surface shows.

ROAD = "road"
WALL = "wall"

OUT_OF_BOUNDS_LABEL = "界外"
WALL_LABEL = "牆壁"
INTERSECTION_LABEL = "交叉路口"


def is_open(cell: str) -> bool:
    return cell == ROAD
