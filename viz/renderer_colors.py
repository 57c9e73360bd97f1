# viz/renderer_colors.py
BG = (15, 15, 15)
WALL = (70, 70, 80)
FOOD = (220, 70, 70)
HEAD = (60, 200, 90)
BODY = (40, 160, 70)
TEXT = (230, 230, 230)
