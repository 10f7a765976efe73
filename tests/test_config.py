import pytest

from archer import config
from archer.config import ConfigError, Settings


def test_default_tuning_values():
    assert config.TIME_LIMIT == 100.0
    assert config.BONUS_TIME == 10.0
    assert config.KILLS_PER_BONUS == 2
    assert config.ZOMBIE_FLOOR == 5
    assert config.MAX_FRAME_DT == pytest.approx(0.040)


def test_settings_default_to_module_constants():
    s = Settings()
    assert s.width == config.SCREEN_WIDTH
    assert s.spawn_interval == config.SPAWN_INTERVAL
    assert s.brute_health == config.BRUTE_HEALTH


@pytest.mark.parametrize(
    "overrides",
    [
        {"spawn_interval": -1.0},
        {"spawn_interval": 0.0},
        {"zombie_speed_min": 0.0},
        {"zombie_speed_min": float("nan")},
        {"zombie_speed_max": float("inf")},
        {"brute_speed_min": float("nan")},
        {"width": float("nan")},
        {"height": float("nan")},
        {"width": float("nan"), "height": float("nan")},
        {"spawn_margin": float("nan")},
        {"arrow_bounds_margin": float("nan")},
        {"zombie_speed_min": 90.0, "zombie_speed_max": 80.0},
        {"brute_speed_max": -5.0},
        {"arrow_speed": 0.0},
        {"time_limit": float("nan")},
        {"brute_chance": 1.5},
        {"zombie_health": 0},
        {"kills_per_bonus": 0},
        {"zombie_floor": -1},
        {"height": 200},
    ],
)
def test_invalid_settings_raise_config_error(overrides):
    with pytest.raises(ConfigError):
        Settings(**overrides)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
