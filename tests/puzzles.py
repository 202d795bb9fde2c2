# tests/puzzles.py
PUZZLE = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# (0, 8) has no legal digit: 1-8 are in its row and 9 is in its column
UNSOLVABLE = (
    "12345678."
    "........9"
    + "." * 63
)

EMPTY = "." * 81
