# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid)
BRAILLE_BASE = 0x2800
BRAILLE = "".join(chr(i) for i in range(BRAILLE_BASE, BRAILLE_BASE + 0x100))

CELL_WIDTH = 2
CELL_HEIGHT = 4

# (dx, dy) within a cell -> bit index in the dot mask
#   0 3
#   1 4
#   2 5
#   6 7
BIT_POSITIONS = {
    (0, 0): 0,
    (0, 1): 1,
    (0, 2): 2,
    (0, 3): 6,
    (1, 0): 3,
    (1, 1): 4,
    (1, 2): 5,
    (1, 3): 7,
}
