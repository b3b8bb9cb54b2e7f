"""Color palette."""

# RGB tuples
BG = (18, 18, 24)
LANE_BG = (34, 34, 46)
TRIGGER_LINE = (230, 230, 230)
NOTE = (58, 160, 255)
NOTE_PERFECT = (76, 175, 80)
NOTE_GOOD = (255, 193, 7)
NOTE_MISS = (158, 158, 158)
HUD_TEXT = (220, 220, 220)
HP_BAR_BG = (34, 34, 34)
HP_BAR_FILL = (76, 175, 80)

GRADE_COLORS = {
    "perfect": NOTE_PERFECT,
    "good": NOTE_GOOD,
    "miss": NOTE_MISS,
}
