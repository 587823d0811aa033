"""
constants.py: Centralized device profiles and loop timing settings.
"""

# -------- Loop Timing --------
BASELINE_DT = 1.0 / 60          # dt reported on the first frame after a (re)start
MAX_DT = 1.0 / 30               # Upper clamp for a single integration step
FRAME_NORMALIZATION = 60        # Physics constants are tuned per 1/60 s frame
RENDER_FPS = 60

# -------- Shared Gameplay Config --------
MIN_GAP_HEIGHT = 160            # Global floor for any profile's gap
POINTS_PER_LEVEL = 10           # Score needed per difficulty level
MAX_LEVEL = 10
DEFAULT_PROFILE = "desktop"
PROFILE_ENV_VAR = "GAPFLYER_PROFILE"

# -------- Device Profiles --------
# Velocities are pixels per 60 Hz frame, accelerations pixels per frame^2.
DESKTOP_PROFILE = {
    "gravity": 0.30,
    "flap_impulse": -7.5,
    "actor_x": 50.0,
    "actor_y": 150.0,
    "actor_width": 60.0,
    "actor_height": 45.0,
    "min_obstacle_width": 80,
    "max_obstacle_width": 110,
    "gap_height": 260.0,
    "min_obstacle_height": 60.0,
    "obstacle_spacing": 380.0,
    "base_speed": 3.0,
    "speed_increment": 1.0,
    "playfield_width": 800.0,
    "playfield_height": 600.0,
    "ground_height": 20.0,
    "spawn_inset": 150.0,
}

MOBILE_PROFILE = {
    "gravity": 0.28,
    "flap_impulse": -6.0,
    "actor_x": 50.0,
    "actor_y": 150.0,
    "actor_width": 36.0,
    "actor_height": 28.0,
    "min_obstacle_width": 60,
    "max_obstacle_width": 80,
    "gap_height": 180.0,
    "min_obstacle_height": 60.0,
    "obstacle_spacing": 300.0,
    "base_speed": 3.0,
    "speed_increment": 0.5,
    "playfield_width": 320.0,
    "playfield_height": 480.0,
    "ground_height": 20.0,
    "spawn_inset": 0.0,           # Mobile spawns right at the playfield edge
}

PROFILES = {
    "desktop": DESKTOP_PROFILE,
    "mobile": MOBILE_PROFILE,
}

# -------- Persistence --------
DB_FILE = "gapflyer_scores.db"
