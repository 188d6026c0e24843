"""Shared aesthetic constants for glyph generation.

Fractions are relative to the canvas size S unless noted. These values
shape the visual character of every glyph; changing any of them changes
the output for every seed.
"""

import math

# ── Attractors ──

# Cardinal and diagonal directions (screen coordinates, y grows downward).
CARDINAL_ANGLES = (0.0, math.pi / 2, math.pi, math.pi * 1.5)
DIAGONAL_ANGLES = (math.pi / 4, 3 * math.pi / 4, 5 * math.pi / 4, 7 * math.pi / 4)

# 2-4 cardinals are always chosen when the field is active.
MIN_CARDINALS = 2
MAX_CARDINALS = 4

# Diagonals join 40% of the time, 1-2 of them.
DIAGONAL_PROBABILITY = 0.4
MIN_DIAGONALS = 1
MAX_DIAGONALS = 2

# Per-attractor strength in [0.3, 0.7).
ATTRACTOR_STRENGTH_MIN = 0.3
ATTRACTOR_STRENGTH_SPAN = 0.4

# 60° influence window around each attractor.
ATTRACTOR_RANGE = math.pi / 3

# Radius push and angular pull factors applied to the pull strength.
RADIAL_PUSH = 0.5
ANGULAR_PULL = 0.3

# 70% of layers opt into attractors when the field is non-empty.
LAYER_ATTRACTOR_PROBABILITY = 0.7

# ── Layer count ──

MIN_LAYERS = 2
MAX_LAYERS = 12
LAYER_JITTER_MIN = -1
LAYER_JITTER_MAX = 2

# ── Symmetry ──

# Half the time the requested mode is swapped for bilateral.
KEEP_REQUESTED_SYMMETRY = 0.5

# ── Blob ──

BLOB_MIN_VERTS = 5
BLOB_MAX_VERTS = 9
BLOB_RADIUS_MIN = 0.15
BLOB_RADIUS_SPAN = 0.2
BLOB_VERTEX_MIN = 0.7  # vertex radius 0.7-1.3x of the base
BLOB_VERTEX_SPAN = 0.6
BLOB_MIN_SMOOTHING = 2
BLOB_EXTRA_SMOOTHING = 2  # 2-4 Chaikin iterations
BLOB_MIN_FOLDS = 4
BLOB_EXTRA_FOLDS = 3  # 4-7 radial folds
BLOB_WIDTH_MIN = 0.8
BLOB_WIDTH_GROWTH = 0.4

# ── Polyline ──

POLY_MIN_VERTS = 6
POLY_MAX_VERTS = 10
POLY_BASE_MIN = 0.12
POLY_BASE_SPAN = 0.12
POLY_ANGLE_JITTER = 0.2  # radians
POLY_RADIUS_MIN = 0.85
POLY_RADIUS_SPAN = 0.3
POLY_POINT_JITTER = 2.0  # canvas units
POLY_FOLD_BASE = 5  # 4-7 radial folds
POLY_WIDTH = 0.7

# ── Hatch ──

HATCH_MIN_SEGMENTS = 4
HATCH_MAX_SEGMENTS = 10
HATCH_LENGTH_MIN = 0.15
HATCH_LENGTH_SPAN = 0.25
HATCH_WIDTH = 0.6

# ── Stroke opacity ──

STROKE_OPACITY_MIN = 0.4
STROKE_OPACITY_SPAN = 0.5

# ── Accent dots ──

DOT_PROBABILITY = 0.4
MIN_DOTS = 2
MAX_DOTS = 6
DOT_RING_INNER = 0.2  # keep dots out of the dead center
DOT_RING_OUTER = 0.4
DOT_BIAS_PROBABILITY = 0.6
DOT_BIAS_WINDOW = math.pi * 0.3  # 54° total, centred on the attractor
DOT_RADIUS_MIN = 0.4  # canvas units
DOT_RADIUS_SPAN = 0.015
DOT_OPACITY_MIN = 0.2
DOT_OPACITY_SPAN = 0.4

# ── Attractor spokes ──

SPOKE_PROBABILITY = 0.5
SPOKE_PER_ATTRACTOR = 0.6
SPOKE_OPACITY_MIN = 0.2
SPOKE_OPACITY_SPAN = 0.3
SPOKE_START_MIN = 0.08
SPOKE_START_SPAN = 0.1
SPOKE_END_MIN = 0.2
SPOKE_END_SPAN = 0.15
SPOKE_WIDTH = 0.6
