"""A Rubik's cube turned face by face, reporting the colours on the upper face."""

# Faces in order: up, front, left, back, right, down.
_FACES = "UFLBRD"
_COLOURS = "wrgoby"


def _row(face, r):
    return [(face, r, c) for c in range(3)]


def _col(face, c):
    return [(face, r, c) for r in range(3)]


def _rev(strip):
    return strip[::-1]


# For every face and direction, the strip swaps that move the bordering stickers.
# Each swap exchanges two strips of three stickers element by element, in order.
_EDGE_SWAPS = {
    (0, "+"): [(_row(4, 0), _row(3, 0)), (_row(3, 0), _row(2, 0)), (_row(2, 0), _row(1, 0))],
    (0, "-"): [(_row(1, 0), _row(2, 0)), (_row(2, 0), _row(3, 0)), (_row(3, 0), _row(4, 0))],
    (5, "+"): [(_row(2, 2), _row(3, 2)), (_row(3, 2), _row(4, 2)), (_row(4, 2), _row(1, 2))],
    (5, "-"): [(_row(1, 2), _row(4, 2)), (_row(4, 2), _row(3, 2)), (_row(3, 2), _row(2, 2))],
    (1, "+"): [
        (_row(0, 2), _rev(_col(2, 2))),
        (_col(2, 2), _row(5, 0)),
        (_row(5, 0), _rev(_col(4, 0))),
    ],
    (1, "-"): [
        (_row(0, 2), _col(4, 0)),
        (_col(4, 0), _rev(_row(5, 0))),
        (_row(5, 0), _col(2, 2)),
    ],
    (2, "+"): [
        (_col(0, 0), _rev(_col(3, 2))),
        (_rev(_col(3, 2)), _col(5, 0)),
        (_col(5, 0), _col(1, 0)),
    ],
    (2, "-"): [
        (_col(0, 0), _col(1, 0)),
        (_col(1, 0), _col(5, 0)),
        (_col(5, 0), _rev(_col(3, 2))),
    ],
    (3, "+"): [
        (_row(0, 0), _col(4, 2)),
        (_col(4, 2), _rev(_row(5, 2))),
        (_row(5, 2), _col(2, 0)),
    ],
    (3, "-"): [
        (_rev(_row(0, 0)), _col(2, 0)),
        (_col(2, 0), _row(5, 2)),
        (_row(5, 2), _rev(_col(4, 2))),
    ],
    (4, "+"): [
        (_col(0, 2), _col(1, 2)),
        (_col(1, 2), _col(5, 2)),
        (_col(5, 2), _rev(_col(3, 0))),
    ],
    (4, "-"): [
        (_col(0, 2), _rev(_col(3, 0))),
        (_rev(_col(3, 0)), _col(5, 2)),
        (_col(5, 2), _col(1, 2)),
    ],
}


class Cube:
    """A solved cube: white up, red front, green left, orange back, blue right, yellow down."""

    def __init__(self):
        self._faces = [[[colour] * 3 for _ in range(3)] for colour in _COLOURS]

    def _spin(self, index, direction):
        face = self._faces[index]
        if direction == "+":
            self._faces[index] = [[face[2 - j][i] for j in range(3)] for i in range(3)]
        else:
            self._faces[index] = [[face[j][2 - i] for j in range(3)] for i in range(3)]

    def turn(self, face, direction):
        """Turn ``face`` (one of U, F, L, B, R, D) clockwise ('+') or counter-clockwise ('-')."""
        if face not in _FACES or len(face) != 1:
            raise ValueError(f"unknown face {face!r}")
        if direction not in ("+", "-"):
            raise ValueError(f"unknown direction {direction!r}")
        index = _FACES.index(face)
        self._spin(index, direction)
        faces = self._faces
        for first, second in _EDGE_SWAPS[(index, direction)]:
            for (fa, ra, ca), (fb, rb, cb) in zip(first, second):
                faces[fa][ra][ca], faces[fb][rb][cb] = faces[fb][rb][cb], faces[fa][ra][ca]

    def upper_face(self):
        """The three rows of the upper face as strings of colour letters."""
        return ["".join(row) for row in self._faces[0]]

    def stickers(self):
        """Every sticker colour, face by face, as one string."""
        return "".join("".join(row) for face in self._faces for row in face)


def solve_cube(moves):
    """Upper face of a fresh cube after the given moves, each like ``"L-"``."""
    cube = Cube()
    for move in moves:
        face, direction = move
        cube.turn(face, direction)
    return cube.upper_face()