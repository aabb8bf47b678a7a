"""Path mini-language for projected rings.

One string per ring, space-joined tokens::

    M x y L x y L x y ... Z

Numbers are fixed-point with exactly two fraction digits. The strings are
consumed verbatim by the rendering layer, so the format must stay stable.
"""

from __future__ import annotations

Point = tuple[float, float]


def format_number(value: float) -> str:
    return f"{value:.2f}"


def round_point(x: float, y: float) -> Point:
    """Round a point exactly as format_ring() writes it."""
    return (float(format_number(x)), float(format_number(y)))


def format_ring(points: list[Point]) -> str:
    """Encode one ring as a path string. Returns "" for an empty ring."""
    if not points:
        return ""
    commands = []
    for idx, (x, y) in enumerate(points):
        op = "M" if idx == 0 else "L"
        commands.append(f"{op} {format_number(x)} {format_number(y)}")
    commands.append("Z")
    return " ".join(commands)


def parse_path(path: str) -> list[list[Point]]:
    """Decode a path string back into its rings.

    Every ``M`` starts a new ring, so a single-ring string yields a list with
    one element.

    Raises:
        ValueError: On unknown commands or missing/non-numeric operands.
    """
    rings: list[list[Point]] = []
    current: list[Point] | None = None
    tokens = path.split()
    i = 0

    while i < len(tokens):
        op = tokens[i]
        if op in ("M", "L"):
            if i + 2 >= len(tokens):
                raise ValueError(f"Truncated '{op}' command at token {i}")
            point = (float(tokens[i + 1]), float(tokens[i + 2]))
            if op == "M" or current is None:
                current = []
                rings.append(current)
            current.append(point)
            i += 3
        elif op == "Z":
            current = None
            i += 1
        else:
            raise ValueError(f"Unknown path command '{op}' at token {i}")

    return rings
