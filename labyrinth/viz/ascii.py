from labyrinth.core.grid import BOTTOM, LEFT, RIGHT, TOP, Grid


def render_ascii(grid: Grid, token=None) -> str:
    """
    Return a (crude) string representation of the maze.
    S marks the start, G the goal and @ the token when one is given.
    """
    lines = []
    top = ["+"]
    for cell in grid.cells[0]:
        top.append("--+" if cell.has_wall(TOP) else "  +")
    lines.append("".join(top))

    for row in grid.cells:
        body = ["|" if row[0].has_wall(LEFT) else " "]
        floor = ["+"]
        for cell in row:
            if token is not None and cell is token:
                mark = "@"
            elif cell is grid.goal:
                mark = "G"
            elif cell is grid.start:
                mark = "S"
            else:
                mark = " "
            body.append(f"{mark} " + ("|" if cell.has_wall(RIGHT) else " "))
            floor.append("--+" if cell.has_wall(BOTTOM) else "  +")
        lines.append("".join(body))
        lines.append("".join(floor))
    return "\n".join(lines)
