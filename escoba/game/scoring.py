"""Final scoring."""

from dataclasses import dataclass

from escoba.models.player import Player

ALL_SEVENS = 4
ALL_GOLDS = 10


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points earned by one player, item by item."""

    brooms: int = 0
    sevens_bonus: int = 0  # All four sevens (3) or guindis (1)
    most_sevens: int = 0
    golds_bonus: int = 0  # All ten golds (2) or most golds (1)
    most_cards: int = 0

    @property
    def total(self) -> int:
        return (
            self.brooms
            + self.sevens_bonus
            + self.most_sevens
            + self.golds_bonus
            + self.most_cards
        )


def score_breakdown(player: Player, opponent: Player) -> ScoreBreakdown:
    """Compute a player's points against an opponent.

    Every item is independent; ties earn nothing.

    Args:
        player: Player to score.
        opponent: The other player.

    Returns:
        ScoreBreakdown
    """
    sevens = player.count_sevens()
    golds = player.count_golds()

    if sevens == ALL_SEVENS:
        sevens_bonus = 3
    elif player.has_guindis():
        sevens_bonus = 1
    else:
        sevens_bonus = 0

    if golds == ALL_GOLDS:
        golds_bonus = 2
    elif golds > opponent.count_golds():
        golds_bonus = 1
    else:
        golds_bonus = 0

    return ScoreBreakdown(
        brooms=player.brooms,
        sevens_bonus=sevens_bonus,
        most_sevens=1 if sevens > opponent.count_sevens() else 0,
        golds_bonus=golds_bonus,
        most_cards=1 if player.captured_count > opponent.captured_count else 0,
    )


def final_score(player: Player, opponent: Player) -> int:
    """Total points of a player against an opponent."""
    return score_breakdown(player, opponent).total
