"""
Tests for the squad rating formula.
"""

import math

import pytest

from rating_system import SquadRatingSystem


@pytest.fixture
def rating_system():
    return SquadRatingSystem()


class TestTeamRatingEdgeCases:
    """Test empty and malformed squads."""

    def test_empty_squad_rates_zero(self, rating_system):
        assert rating_system.calculate_team_rating([]) == 0

    def test_none_rates_zero(self, rating_system):
        assert rating_system.calculate_team_rating(None) == 0

    def test_non_numeric_rating_raises(self, rating_system):
        with pytest.raises(TypeError):
            rating_system.calculate_team_rating([85, "86"])

    def test_nan_rating_raises(self, rating_system):
        with pytest.raises(ValueError):
            rating_system.calculate_team_rating([85, math.nan])


class TestSinglePlayerRatings:
    """A single player is rated against ten empty slots."""

    @pytest.mark.parametrize(
        "rating,expected",
        [(45, 7), (60, 10), (63, 10), (70, 12), (75, 13), (85, 14), (87, 15), (99, 17)],
    )
    def test_single_player(self, rating_system, rating, expected):
        assert rating_system.calculate_team_rating([rating]) == expected


class TestPartialSquadRatings:
    """Known ratings for partially filled squads."""

    def test_two_players(self, rating_system):
        assert rating_system.calculate_team_rating([87, 87]) == 28
        assert rating_system.calculate_team_rating([85, 85]) == 28
        assert rating_system.calculate_team_rating([90, 90]) == 29

    def test_verified_in_game_examples(self, rating_system):
        assert rating_system.calculate_team_rating([85, 86, 87, 96]) == 52
        assert rating_system.calculate_team_rating([95, 92, 94, 93, 93, 93, 92]) == 80

    def test_five_players(self, rating_system):
        assert rating_system.calculate_team_rating([85, 87, 83, 86, 84]) == 59


class TestFullSquadRatings:
    """Ratings for complete 11-player squads."""

    def test_mixed_squad(self, rating_system):
        ratings = [85, 87, 83, 86, 84, 88, 82, 85, 86, 84, 87]
        assert rating_system.calculate_team_rating(ratings) == 85

    def test_known_83_combination(self, rating_system):
        """9x83 + 2x82 reaches 83 thanks to the above-average correction."""
        assert rating_system.calculate_team_rating([83] * 9 + [82] * 2) == 83

    def test_cheapest_83_combination(self, rating_system):
        """1x84 + 6x83 + 4x82 also reaches 83 with only 910 rating points."""
        assert rating_system.calculate_team_rating([84] + [83] * 6 + [82] * 4) == 83

    @pytest.mark.parametrize("rating", [75, 85])
    def test_all_same_rating(self, rating_system, rating):
        assert rating_system.calculate_team_rating([rating] * 11) == rating

    def test_correction_does_not_round_up_below_target(self, rating_system):
        """1x86 + 10x82 has 902 points but only rates 82."""
        assert rating_system.calculate_team_rating([86] + [82] * 10) == 82


class TestPaddingIdempotence:
    """Padding with zeros must not change the rating."""

    @pytest.mark.parametrize(
        "ratings",
        [
            [45],
            [87, 87],
            [85, 86, 87, 96],
            [95, 92, 94, 93, 93, 93, 92],
            [85, 87, 83, 86, 84, 88, 82, 85, 86, 84, 87],
        ],
    )
    def test_zero_padding_is_idempotent(self, rating_system, ratings):
        padded = ratings + [0] * (11 - len(ratings))
        assert rating_system.calculate_team_rating(ratings) == rating_system.calculate_team_rating(padded)

    def test_order_does_not_matter(self, rating_system):
        ratings = [85, 86, 87, 96]
        assert rating_system.calculate_team_rating(ratings) == rating_system.calculate_team_rating(
            list(reversed(ratings))
        )


class TestPrice:
    """Tests for SquadRatingSystem.calculate_price."""

    def test_total_price(self, rating_system):
        prices = {83: 1000, 85: 1500, 87: 2000}
        assert rating_system.calculate_price([85, 87, 83], prices) == 4500

    def test_missing_prices_cost_nothing(self, rating_system):
        assert rating_system.calculate_price([85, 99], {85: 1500}) == 1500

    def test_no_price_table(self, rating_system):
        assert rating_system.calculate_price([85, 99], None) == 0


class TestMinimumRatingNeeded:
    """Tests for SquadRatingSystem.calculate_minimum_rating_needed."""

    def test_minimum_rating_needed(self, rating_system):
        # 85 * 11 = 935; 935 - 255 = 680; 680 / 8 = 85
        assert rating_system.calculate_minimum_rating_needed(85, [84, 85, 86], 8, 11) == 85

    def test_rounds_up(self, rating_system):
        # 86 * 11 = 946; 946 - 345 = 601; 601 / 7 = 85.86
        assert rating_system.calculate_minimum_rating_needed(86, [89, 87, 85, 84], 7) == 86

    def test_always_uses_eleven_players(self, rating_system):
        """squad_size does not change the arithmetic."""
        assert rating_system.calculate_minimum_rating_needed(
            85, [84, 85, 86], 8, 11
        ) == rating_system.calculate_minimum_rating_needed(85, [84, 85, 86], 8, 15)

    def test_no_remaining_slots_raises(self, rating_system):
        with pytest.raises(ValueError, match="remaining_slots"):
            rating_system.calculate_minimum_rating_needed(85, [85] * 11, 0)
