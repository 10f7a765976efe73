from __future__ import annotations
import math
from dataclasses import dataclass


# Screen settings
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 600
FPS = 60
# Largest frame delta fed to the simulation (seconds); longer stalls are cut
MAX_FRAME_DT = 0.040

# Session settings
# Seconds on the clock at the start of every run
TIME_LIMIT = 100.0
# Seconds added to the clock when the bonus triggers
BONUS_TIME = 10.0
# Kills needed for one time bonus
KILLS_PER_BONUS = 2

# Archer settings
# Horizontal position of the archer (pixels from the left edge)
ARCHER_X = 110.0
# Distance from the bottom edge to the archer's feet
ARCHER_FLOOR_OFFSET = 110.0
# Resize clamp for the archer's vertical position
ARCHER_MIN_Y = 60.0
ARCHER_BOTTOM_MARGIN = 40.0
# Muzzle offset relative to the archer's feet
MUZZLE_OFFSET_X = 28.0
MUZZLE_OFFSET_Y = -40.0
# Arrows leave the bow this far along the aim line
MUZZLE_LEAD = 10.0
# A zombie whose leading edge reaches ARCHER_X + CATCH_BUFFER eats the archer
CATCH_BUFFER = 12.0

# Projectile settings
# Speed of arrows (pixels per second)
ARROW_SPEED = 1200.0
# Shaft length; the tip sits this far along the heading from the base
ARROW_LENGTH = 34.0
# Arrowhead size (drawing only)
ARROW_HEAD = 8.0
# Arrows are dropped once they leave the playfield by more than this
ARROW_BOUNDS_MARGIN = 50.0

# Enemy settings
ZOMBIE_WIDTH = 44.0
ZOMBIE_HEIGHT = 70.0
# Walking speed band for standard zombies (pixels per second)
ZOMBIE_SPEED_MIN = 40.0
ZOMBIE_SPEED_MAX = 80.0
# Reinforced zombies are tougher and slower
BRUTE_SPEED_MIN = 30.0
BRUTE_SPEED_MAX = 60.0
# Hit points (number of arrow hits to kill)
ZOMBIE_HEALTH = 1
BRUTE_HEALTH = 3
# Probability that a spawned zombie is reinforced
BRUTE_CHANCE = 0.3
# Spawn position: just past the right edge, away from the HUD and the ground
SPAWN_X_OFFSET = 40.0
SPAWN_MARGIN = 110.0
# Seconds between timed spawns
SPAWN_INTERVAL = 0.9
# Minimum zombie population kept on the field
ZOMBIE_FLOOR = 5
# Zombies this far past the left edge are dropped without scoring
ZOMBIE_ESCAPE_X = -100.0

# HUD settings
HUD_BOX = (18, 18, 180, 74)
HUD_FONT_SIZE = 22
OVERLAY_FONT_SIZE = 30
# Lifetime of "+1" / "+10s" popups (seconds)
POPUP_DURATION = 0.8
# Upward drift of popups (pixels per second)
POPUP_RISE_SPEED = 40.0
GROUND_HEIGHT = 80

# Colors
SKY_TOP_COLOR = (7, 20, 40)
SKY_MID_COLOR = (8, 18, 24)
SKY_BOTTOM_COLOR = (4, 16, 18)
GROUND_COLOR = (11, 43, 18)
ARCHER_BODY_COLOR = (0, 255, 204)
ARCHER_BOW_COLOR = (136, 206, 2)
MUZZLE_COLOR = (0, 51, 0)
ARROW_SHAFT_COLOR = (255, 209, 102)
ARROW_HEAD_COLOR = (255, 183, 3)
ZOMBIE_COLOR = (107, 191, 74)
BRUTE_COLOR = (74, 140, 60)
HP_BACK_COLOR = (34, 34, 34)
HP_FILL_COLOR = (255, 56, 92)
HUD_TEXT_COLOR = (0, 255, 204)
OVERLAY_TEXT_COLOR = (255, 221, 136)
KILL_POPUP_COLOR = (255, 255, 255)
BONUS_POPUP_COLOR = (255, 209, 102)

# Terminal overlay messages, keyed by end reason
MESSAGE_TIME_UP = "Time's up! Tap or press SPACE to restart"
MESSAGE_CAUGHT = "Eaten! Tap or press SPACE to restart"


class ConfigError(ValueError):
    """Raised when game settings would make the simulation ill-defined."""


@dataclass
class Settings:
    """
    Tunable parameters of one game session.
    Defaults come from the module constants; any field may be overridden
    per instance. Values are validated on construction.
    """

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    time_limit: float = TIME_LIMIT
    bonus_time: float = BONUS_TIME
    kills_per_bonus: int = KILLS_PER_BONUS
    max_frame_dt: float = MAX_FRAME_DT
    arrow_speed: float = ARROW_SPEED
    arrow_length: float = ARROW_LENGTH
    arrow_bounds_margin: float = ARROW_BOUNDS_MARGIN
    zombie_width: float = ZOMBIE_WIDTH
    zombie_height: float = ZOMBIE_HEIGHT
    zombie_speed_min: float = ZOMBIE_SPEED_MIN
    zombie_speed_max: float = ZOMBIE_SPEED_MAX
    brute_speed_min: float = BRUTE_SPEED_MIN
    brute_speed_max: float = BRUTE_SPEED_MAX
    zombie_health: int = ZOMBIE_HEALTH
    brute_health: int = BRUTE_HEALTH
    brute_chance: float = BRUTE_CHANCE
    spawn_interval: float = SPAWN_INTERVAL
    spawn_margin: float = SPAWN_MARGIN
    zombie_floor: int = ZOMBIE_FLOOR

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError for the first invalid field found."""
        positive = (
            "time_limit",
            "bonus_time",
            "max_frame_dt",
            "arrow_speed",
            "arrow_length",
            "zombie_width",
            "zombie_height",
            "spawn_interval",
        )
        for name in positive:
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")
        self._check_speed_band("zombie", self.zombie_speed_min, self.zombie_speed_max)
        self._check_speed_band("brute", self.brute_speed_min, self.brute_speed_max)
        if self.zombie_health < 1 or self.brute_health < 1:
            raise ConfigError("zombie hit points must be at least 1")
        if not 0.0 <= self.brute_chance <= 1.0:
            raise ConfigError(
                f"brute_chance must lie in [0, 1], got {self.brute_chance!r}"
            )
        if self.kills_per_bonus < 1:
            raise ConfigError("kills_per_bonus must be at least 1")
        if self.zombie_floor < 0:
            raise ConfigError("zombie_floor cannot be negative")
        for margin in (self.arrow_bounds_margin, self.spawn_margin):
            if not math.isfinite(margin) or margin < 0:
                raise ConfigError(f"margins must be finite and non-negative, got {margin!r}")
        if not all(math.isfinite(v) for v in (self.width, self.height)):
            raise ConfigError(
                f"playfield size must be finite, got {self.width}x{self.height}"
            )
        if self.width <= 0 or self.height <= 2 * self.spawn_margin:
            raise ConfigError(
                f"playfield {self.width}x{self.height} leaves no spawn band"
            )

    @staticmethod
    def _check_speed_band(label: str, low: float, high: float) -> None:
        if not (math.isfinite(low) and math.isfinite(high)) or low <= 0 or high <= 0:
            raise ConfigError(f"{label} speed bounds must be positive")
        if low > high:
            raise ConfigError(
                f"{label} speed band is inverted: min {low} > max {high}"
            )
