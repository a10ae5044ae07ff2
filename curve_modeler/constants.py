"""
Curve Modeler Constants Module

Empirical constants, model boundaries and benchmark tables.
These values are domain tuning, not configuration.
"""

# ============================================================
# Model selection boundaries (seconds)
# ============================================================

APR_MAX_DURATION = 180          # APR model up to 3 min
TRANSITION_ZONE_START = 120     # APR and CP-W' overlap from 2 min
CP_MAX_DURATION = 960           # CP-W' up to 16 min, Power Law beyond
CS_MAX_DURATION = 1020          # CS-D' below 17 min (running)
PMAX_DURATION = 1               # exponential form is replaced by Pmax here

# ============================================================
# Cycling fitter
# ============================================================

APR_K_DEFAULT = 0.026
APR_K_MIN = 0.015
APR_K_MAX = 0.05

LT1_REFERENCE_DURATION = 1800   # 30 min power
LT1_MIN_FRACTION = 0.72
LT1_ESTIMATE_FRACTION = 0.75
LT1_MAX_FRACTION = 0.80

# ============================================================
# Running fitter
# ============================================================

RUNNING_PL_DURATIONS = (300, 600, 900)   # synthesized from CS-D'
RUNNING_LONG_MIN_DURATION = 1200         # long test must exceed 20 min
MAP_DURATION = 180

HIGH_ENDURANCE_EXPONENT = 0.90
LT1_CS_FRACTION_HIGH = 0.84
LT1_CS_FRACTION_LOW = 0.80
LT1_LOWER_SPEED_FRACTION = 0.96

# ============================================================
# Regression / solver
# ============================================================

REGRESSION_DENOMINATOR_EPS = 1e-12

BISECTION_POWER_TOLERANCE = 0.1
BISECTION_TIME_TOLERANCE = 0.01
BISECTION_MAX_ITERATIONS = 100

# ============================================================
# Scoring
# ============================================================

SCORE_MULTIPLIER = 95
SPECIALIZATION_Z_THRESHOLD = 1.0
CLIMBER_MAX_BODY_WEIGHT = 70

# Rarity tiers (minimum overall rating), highest first
RARITY_THRESHOLDS = (
    ("ALIEN", 100),
    ("HERO", 95),
    ("PRO", 90),
    ("ELITE", 85),
)

# Cycling durations scored on the athlete card
CYCLING_STAT_DURATIONS = {
    "NM": 5,       # Neuromuscular
    "LACT": 60,    # Lactate / anaerobic
    "VO2": 300,    # VO2max
    "THR": 1200,   # Threshold
    "STA": 3600,   # Stamina
}

# W/kg benchmarks per stat
CYCLING_BENCHMARKS = {
    "male": {"NM": 24.65, "LACT": 11.33, "VO2": 7.65, "THR": 6.59, "STA": 5.76},
    "female": {"NM": 17.2, "LACT": 9.4, "VO2": 6.5, "THR": 5.5, "STA": 4.9},
}

# Running race distances scored on the athlete card [m]
RUNNING_STAT_DISTANCES = {
    "1500m": 1500.0,
    "5000m": 5000.0,
    "10km": 10000.0,
    "Half": 21097.5,
    "Marathon": 42195.0,
}

# World-record caliber times per distance [s]
RUNNING_BENCHMARKS = {
    "male": {"1500m": 206, "5000m": 769, "10km": 1584, "Half": 3451, "Marathon": 7235},
    "female": {"1500m": 229, "5000m": 853, "10km": 1801, "Half": 3916, "Marathon": 8221},
}

# ============================================================
# Zones and physiological summary
# ============================================================

VO2MAX_SLOPE = 7.44
VO2MAX_INTERCEPT = 27.51
VO2MAX_REFERENCE_DURATION = 300   # P5min always from CP-W'
MMSS_LOWER_DURATION = 3000        # 50 min power from Power Law

CYCLING_Z1_LT1_FRACTION = 0.8
CYCLING_Z3_CP_FRACTION = 0.92
CYCLING_Z4_CP_FRACTION = 1.02

RUNNING_Z1_LT1_FRACTION = 0.86
RUNNING_Z3_DURATION = 3600
RUNNING_Z4_DURATION = 1500
RUNNING_Z5_DURATION = 180

FATIGUE_RESISTANT_MAX = 7.5
FATIGUE_MIXED_MAX = 9.5

CYCLING_DELTA_SPEED_THRESHOLD = -5
RUNNING_DELTA_ENDURANCE_THRESHOLD = -3

# ============================================================
# Tables and chart grids
# ============================================================

SUSTAINABLE_POWER_DURATIONS = [
    ("5s", 5), ("60s", 60), ("3m", 180), ("5m", 300), ("10m", 600),
    ("20m", 1200), ("30m", 1800), ("45m", 2700), ("60m", 3600),
]

SUSTAINABLE_RUNNING_DISTANCES = [
    ("1500m", 1500.0), ("2000m", 2000.0), ("3000m", 3000.0), ("5000m", 5000.0),
    ("10km", 10000.0), ("15km", 15000.0), ("Half Marathon", 21097.5),
    ("30km", 30000.0), ("Marathon", 42195.0), ("50km", 50000.0),
]

CP_CURVE_MIN_DURATION = 120
CP_CURVE_MAX_DURATION = 3600
