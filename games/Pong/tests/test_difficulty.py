"""Tests for difficulty profiles and lookup."""

import pytest
from pydantic import ValidationError

from games.Pong.difficulty import (
    DIFFICULTY_PROFILES,
    WIN_SCORE,
    DifficultyProfile,
    UnknownDifficultyError,
    get_difficulty_names,
    get_difficulty_profile,
)


class TestProfiles:
    """Tuning values of the three tiers."""

    def test_menu_order(self):
        """Tiers are listed easiest first."""
        assert get_difficulty_names() == ['easy', 'medium', 'hard']

    @pytest.mark.parametrize("key,ball,opp,error", [
        ('easy', 4, 2, 120),
        ('medium', 6, 5, 28),
        ('hard', 12, 8, 2),
    ])
    def test_tier_constants(self, key, ball, opp, error):
        """Each tier carries its ball speed, opponent speed and error."""
        profile = get_difficulty_profile(key)
        assert profile.name == key
        assert profile.ball_speed == ball
        assert profile.opponent_speed == opp
        assert profile.opponent_error == error
        assert profile.win_score == WIN_SCORE == 3

    def test_tracking_policies(self):
        """Policy flags differ per tier."""
        easy = DIFFICULTY_PROFILES['easy']
        medium = DIFFICULTY_PROFILES['medium']
        hard = DIFFICULTY_PROFILES['hard']

        assert easy.reacts_when_approaching_only
        assert easy.tracking_deadband == 20
        assert not medium.reacts_when_approaching_only
        assert medium.tracking_deadband == 12
        assert medium.noisy_tracking
        assert not hard.noisy_tracking
        assert hard.tracking_deadband == 2

    def test_profiles_are_frozen(self):
        """Profiles cannot be modified after creation."""
        with pytest.raises(ValidationError):
            DIFFICULTY_PROFILES['easy'].ball_speed = 99

    def test_speed_must_be_positive(self):
        """Zero ball speed is rejected."""
        with pytest.raises(ValidationError):
            DifficultyProfile(name='x', ball_speed=0, opponent_speed=1,
                              opponent_error=0, tracking_deadband=0)


class TestLookup:
    """get_difficulty_profile error handling."""

    @pytest.mark.parametrize("key", ['impossible', 'Easy', '', None])
    def test_unknown_key_raises(self, key):
        """Unknown or wrongly cased keys raise."""
        with pytest.raises(UnknownDifficultyError) as exc_info:
            get_difficulty_profile(key)
        assert exc_info.value.key == key

    def test_error_is_value_error(self):
        """Callers can catch it as a ValueError."""
        with pytest.raises(ValueError, match="expected one of: easy, medium, hard"):
            get_difficulty_profile('nightmare')
