"""
Pre-calculated SBC combinations for target ratings 80-92.

Each entry is an 11-player fill written as (rating, count) pairs. Entries are
listed in the order they should be tried; the trailing comment gives the
total rating points of the fill.
"""

from collections.abc import Mapping
from types import MappingProxyType

Combination = tuple[tuple[int, int], ...]

OPTIMAL_SBC_COMBINATIONS: Mapping[int, tuple[Combination, ...]] = MappingProxyType({
    80: (
        ((82, 1), (81, 2), (80, 8)),  # 884
        ((83, 1), (80, 10)),  # 883
        ((82, 2), (80, 9)),  # 884
        ((81, 4), (80, 7)),  # 884
        ((84, 1), (79, 10)),  # 874
        ((82, 3), (79, 8)),  # 878
    ),
    81: (
        ((82, 3), (81, 8)),  # 894
        ((83, 1), (81, 10)),  # 893
        ((84, 1), (80, 10)),  # 884
        ((82, 5), (80, 6)),  # 890
        ((83, 2), (80, 9)),  # 886
        ((85, 1), (79, 10)),  # 875
    ),
    82: (
        ((83, 2), (82, 9)),  # 904
        ((84, 1), (82, 10)),  # 904
        ((83, 4), (81, 7)),  # 899
        ((85, 1), (81, 10)),  # 895
        ((84, 2), (81, 9)),  # 897
        ((86, 1), (80, 10)),  # 886
    ),
    83: (
        ((83, 9), (82, 2)),  # 911
        ((84, 1), (83, 6), (82, 4)),  # 910
        ((85, 1), (82, 10)),  # 905
        ((84, 2), (83, 7), (82, 2)),  # 913
        ((86, 1), (82, 10)),  # 906
        ((84, 3), (82, 8)),  # 908
    ),
    84: (
        ((84, 11),),  # 924
        ((85, 1), (84, 8), (83, 2)),  # 923
        ((86, 1), (83, 10)),  # 916
        ((85, 2), (84, 7), (83, 2)),  # 924
        ((87, 1), (83, 10)),  # 917
        ((85, 3), (83, 8)),  # 919
    ),
    85: (
        ((85, 11),),  # 935
        ((86, 1), (85, 8), (84, 2)),  # 934
        ((87, 1), (84, 10)),  # 927
        ((86, 2), (85, 7), (84, 2)),  # 935
        ((88, 1), (84, 10)),  # 928
        ((86, 3), (84, 8)),  # 930
    ),
    86: (
        ((86, 11),),  # 946
        ((87, 1), (86, 8), (85, 2)),  # 945
        ((88, 1), (85, 10)),  # 938
        ((87, 2), (86, 7), (85, 2)),  # 946
        ((89, 1), (85, 10)),  # 939
        ((87, 3), (85, 8)),  # 941
    ),
    87: (
        ((87, 11),),  # 957
        ((88, 1), (87, 8), (86, 2)),  # 956
        ((89, 1), (86, 10)),  # 949
        ((88, 2), (87, 7), (86, 2)),  # 957
        ((90, 1), (86, 10)),  # 950
        ((88, 3), (86, 8)),  # 952
    ),
    88: (
        ((88, 11),),  # 968
        ((89, 1), (88, 8), (87, 2)),  # 967
        ((90, 1), (87, 10)),  # 960
        ((89, 2), (88, 7), (87, 2)),  # 968
        ((91, 1), (87, 10)),  # 961
        ((89, 3), (87, 8)),  # 963
    ),
    89: (
        ((89, 11),),  # 979
        ((90, 1), (89, 8), (88, 2)),  # 978
        ((91, 1), (88, 10)),  # 971
        ((90, 2), (89, 7), (88, 2)),  # 979
        ((92, 1), (88, 10)),  # 972
        ((90, 3), (88, 8)),  # 974
    ),
    90: (
        ((90, 11),),  # 990
        ((91, 1), (90, 8), (89, 2)),  # 989
        ((92, 1), (89, 10)),  # 982
        ((91, 2), (90, 7), (89, 2)),  # 990
        ((93, 1), (89, 10)),  # 983
        ((91, 3), (89, 8)),  # 985
    ),
    91: (
        ((91, 11),),  # 1001
        ((92, 1), (91, 8), (90, 2)),  # 1000
        ((93, 1), (90, 10)),  # 993
        ((92, 2), (91, 7), (90, 2)),  # 1001
        ((94, 1), (90, 10)),  # 994
        ((92, 3), (90, 8)),  # 996
    ),
    92: (
        ((92, 11),),  # 1012
        ((93, 1), (92, 8), (91, 2)),  # 1011
        ((94, 1), (91, 10)),  # 1004
        ((93, 2), (92, 7), (91, 2)),  # 1012
        ((95, 1), (91, 10)),  # 1005
        ((93, 3), (91, 8)),  # 1007
    ),
})

OPTIMAL_RATING_RANGE = (min(OPTIMAL_SBC_COMBINATIONS), max(OPTIMAL_SBC_COMBINATIONS))


def get_optimal_combinations(target_rating: int) -> tuple[Combination, ...]:
    """Pre-calculated combinations for a target rating, or an empty tuple outside 80-92."""
    low, high = OPTIMAL_RATING_RANGE
    if target_rating < low or target_rating > high:
        return ()
    return OPTIMAL_SBC_COMBINATIONS.get(target_rating, ())


def is_combination_possible(combination: Combination, available_counts: Mapping[int, int]) -> bool:
    """Check that the inventory holds enough players of every rating in the combination."""
    for rating, needed in combination:
        if available_counts.get(rating, 0) < needed:
            return False
    return True


def combination_to_ratings(combination: Combination) -> list[int]:
    """Expand a combination into individual player ratings."""
    ratings: list[int] = []
    for rating, count in combination:
        ratings.extend([rating] * count)
    return ratings


def calculate_combination_points(combination: Combination) -> int:
    """Total rating points used by a combination."""
    return sum(rating * count for rating, count in combination)
