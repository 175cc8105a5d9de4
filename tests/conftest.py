import pytest

from maze_search import Maze, load_maze

# 'A' at (0,0), wall at (1,1), 'B' at (2,1)
SCENARIO = "A \n █\n B"

OPEN_3X3 = "A  \n   \n  B"

CORRIDORS = "\n".join([
    "##########",
    "#A   #   #",
    "# ## # # #",
    "#  #   #B#",
    "##########",
])

LOOPS = "\n".join([
    "A        ",
    " ### ### ",
    "   #   # ",
    " # # # # ",
    " #   #  B",
])

# 'B' boxed in by walls on both open sides
WALLED_END = "A  \n  █\n █B"

# Ring around the wall under 'A'. A* pops (2,2) before (1,3) on an f tie,
# reaching (2,3) first with g=5; (1,3) then lowers it to g=3.
COST_REVISION = "\n".join([
    "# A #",
    "# # #",
    "#   #",
    "### #",
    "B   #",
])

SOLVABLE = [SCENARIO, OPEN_3X3, CORRIDORS, LOOPS, COST_REVISION, "A \n B", "A  \n █B"]


@pytest.fixture
def scenario() -> Maze:
    return load_maze(SCENARIO)


@pytest.fixture
def walled_end() -> Maze:
    return load_maze(WALLED_END)


@pytest.fixture
def maze_file(tmp_path):
    def write(text: str, name: str = "maze.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write
