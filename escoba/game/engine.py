"""Match engine for Escoba."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Iterable

from escoba.config import Config
from escoba.errors import (
    CardNotFoundError,
    InvalidArgumentError,
    InvalidOperationError,
)
from escoba.models.card import Card
from escoba.models.deck import Deck
from escoba.models.match_state import MatchPhase, MatchState
from escoba.models.player import Player
from escoba.models.summary import MatchSummary, PlayerResult
from escoba.models.table import RoundTable

from .scoring import ScoreBreakdown, score_breakdown
from .turns import TurnSequencer
from .validator import MoveValidator

if TYPE_CHECKING:
    from escoba.logging import MatchLogger

logger = logging.getLogger(__name__)


@dataclass
class PlayResult:
    """Outcome of a successful play."""

    player: Player
    card: Card
    captured: list[Card] = field(default_factory=list)
    is_broom: bool = False

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)


class MatchEngine:
    """Two-player Escoba match.

    Every operation checks all of its preconditions before touching any
    state, so a rejected call leaves the match exactly as it was.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        config: Config | None = None,
        match_logger: MatchLogger | None = None,
    ):
        """Initialize match engine.

        Args:
            player1: First player (starts every round)
            player2: Second player
            config: Configuration (uses defaults if not provided)
            match_logger: MatchLogger instance for detailed logging
        """
        if player1 is None or player2 is None:
            raise InvalidArgumentError("Players cannot be None")
        if player1 is player2:
            raise InvalidArgumentError("Players must be distinct")

        self.config = config or Config()
        self.rules = self.config.rules
        self.match_logger = match_logger

        self.validator = MoveValidator(self.rules)

        self._player1 = player1
        self._player2 = player2
        self.deck = Deck()
        self.table = RoundTable()
        self.state = MatchState()
        self.turns = TurnSequencer([player1, player2], self.rules.turns_per_round)
        self.turns.start(player1)
        self._last_capturer: Player | None = None

        if self.match_logger:
            self.match_logger.log_match_start(self.players)

    # Accessors

    @property
    def player1(self) -> Player:
        return self._player1

    @property
    def player2(self) -> Player:
        return self._player2

    @property
    def players(self) -> list[Player]:
        return [self._player1, self._player2]

    @property
    def round_number(self) -> int:
        """Current round, or the last round played once finished."""
        return self.state.round_number

    @property
    def phase(self) -> MatchPhase:
        return self.state.phase

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    @property
    def current_player(self) -> Player:
        """Player whose turn it is."""
        return self.turns.current

    @property
    def turns_played(self) -> int:
        """Turns played in the current round."""
        return self.turns.turns_played

    @property
    def table_cards(self) -> list[Card]:
        return self.table.cards()

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    @property
    def last_capturer(self) -> Player | None:
        return self._last_capturer

    def is_round_over(self) -> bool:
        return self.turns.is_round_over()

    # Dealing

    def deal_initial(
        self,
        hand1: list[Card] | None,
        hand2: list[Card] | None,
        table: list[Card] | None,
    ) -> None:
        """Deal the first round: 3 cards each and 4 face-up on the table.

        Raises:
            InvalidOperationError: If this is not the start of round 1.
            InvalidArgumentError: On None lists or wrong card counts.
            CardNotFoundError: If a dealt card is not in the deck.
        """
        if self.is_finished or self.state.round_number != 1:
            raise InvalidOperationError("Initial deal is only allowed in round 1")
        if self.state.phase != MatchPhase.NEW:
            raise InvalidOperationError("Round 1 has already been dealt")
        if hand1 is None or hand2 is None or table is None:
            raise InvalidArgumentError("Dealt card lists cannot be None")
        if (
            len(hand1) != self.rules.hand_size
            or len(hand2) != self.rules.hand_size
            or len(table) != self.rules.initial_table_size
        ):
            raise InvalidArgumentError(
                f"Initial deal needs {self.rules.hand_size} cards per player "
                f"and {self.rules.initial_table_size} on the table"
            )
        self._check_in_deck([*hand1, *hand2, *table])

        self._deal_to_hand(self._player1, hand1)
        self._deal_to_hand(self._player2, hand2)
        for card in table:
            self.deck.draw(card)
        self.table.set_all(table)
        self.state.phase = MatchPhase.DEALT

        logger.info(f"Round 1 dealt, table: {self.table}")
        self._log_deal()

    def deal_round(self, hand1: list[Card] | None, hand2: list[Card] | None) -> None:
        """Deal 3 new cards to each player for rounds after the first.

        Raises:
            InvalidOperationError: If the match is finished, this is round 1
                or the round has already been dealt.
            InvalidArgumentError: On None lists or wrong card counts.
            CardNotFoundError: If a dealt card is not in the deck.
        """
        if self.is_finished:
            raise InvalidOperationError("Cannot deal, the match is finished")
        if self.state.round_number == 1:
            raise InvalidOperationError("Round 1 is dealt with deal_initial")
        if self.state.phase != MatchPhase.NEW:
            raise InvalidOperationError(
                f"Round {self.state.round_number} has already been dealt"
            )
        if hand1 is None or hand2 is None:
            raise InvalidArgumentError("Dealt card lists cannot be None")
        if len(hand1) != self.rules.hand_size or len(hand2) != self.rules.hand_size:
            raise InvalidArgumentError(
                f"Each player must receive exactly {self.rules.hand_size} cards"
            )
        self._check_in_deck([*hand1, *hand2])

        self._deal_to_hand(self._player1, hand1)
        self._deal_to_hand(self._player2, hand2)
        self.turns.set_current(self._player1)
        self.state.phase = MatchPhase.DEALT

        logger.info(f"Round {self.state.round_number} dealt ({len(self.deck)} left in deck)")
        self._log_deal()

    def _check_in_deck(self, cards: list[Card]) -> None:
        """Make sure every card can be drawn, before drawing any."""
        for card in cards:
            if card is None:
                raise InvalidArgumentError("Dealt cards cannot be None")
            if card not in self.deck:
                raise CardNotFoundError(f"Card {card} is not in the deck")
        if len(set(cards)) != len(cards):
            raise InvalidArgumentError("The same card is dealt twice")

    def _deal_to_hand(self, player: Player, cards: list[Card]) -> None:
        for card in cards:
            self.deck.draw(card)
            player.add_to_hand(card)

    # Playing

    def play(self, card: Card | None, capture: Iterable[Card] | None) -> PlayResult:
        """Play a card for the current player, capturing if asked to.

        Args:
            card: Card from the current player's hand
            capture: Table cards to capture; empty to just drop the card

        Returns:
            PlayResult

        Raises:
            InvalidOperationError: If the match or the round is over.
            InvalidArgumentError: If the card is not in hand, a captured card
                is not on the table, or the capture does not add up to 15.
        """
        if self.is_finished:
            raise InvalidOperationError("The match is finished")
        if self.turns.is_round_over():
            raise InvalidOperationError("The round is over")
        if card is None:
            raise InvalidArgumentError("Card cannot be None")
        if capture is None:
            raise InvalidArgumentError("Capture list cannot be None")

        capture = list(capture)
        player = self.turns.current
        validation = self.validator.validate_play(
            card, capture, player.hand, self.table.cards()
        )
        if not validation.is_valid:
            raise InvalidArgumentError(validation.error_message)

        if validation.is_capture:
            result = self._capture(player, card, capture, validation.is_broom)
        else:
            player.remove_from_hand(card)
            self.table.add(card)
            result = PlayResult(player=player, card=card)
            logger.debug(f"{player.name} dropped {card}")

        self.turns.advance()
        if self.turns.is_round_over():
            self.turns.set_current(self._player1)
            self.state.phase = MatchPhase.ROUND_OVER
            logger.info(f"Round {self.state.round_number} over, {self.table}")
        else:
            self.state.phase = MatchPhase.IN_PLAY

        if self.match_logger:
            self.match_logger.log_play(
                self.state.round_number,
                self.turns.turns_played,
                player,
                card,
                result.captured,
                result.is_broom,
                self.table.cards(),
            )
        return result

    def _capture(
        self,
        player: Player,
        card: Card,
        capture: list[Card],
        is_broom: bool,
    ) -> PlayResult:
        """Move the played card and the captured table cards to the player."""
        player.remove_from_hand(card)
        player.add_to_captured(card)

        self.table.remove_all(capture)
        for c in capture:
            player.add_to_captured(c)

        self._last_capturer = player
        if is_broom:
            player.sweep_bonus()
            logger.info(f"Escoba! {player.name} cleared the table with {card}")
        else:
            logger.debug(f"{player.name} captured {capture} with {card}")

        return PlayResult(player=player, card=card, captured=capture, is_broom=is_broom)

    def next_turn(self) -> None:
        """Pass the turn without playing a card."""
        if self.is_finished:
            raise InvalidOperationError("The match is finished")
        self.turns.advance()
        if self.turns.is_round_over():
            self.state.phase = MatchPhase.ROUND_OVER

    def restart_turns(self) -> None:
        """Reset the turn counter once a round is over; player 1 starts."""
        if self.is_finished:
            raise InvalidOperationError("The match is finished")
        if not self.turns.is_round_over():
            raise InvalidOperationError("The round is not over yet")
        self.turns.reset()
        self.turns.set_current(self._player1)
        self.state.phase = MatchPhase.DEALT

    def set_current_player(self, player: Player | None) -> None:
        """Hand the turn to a player; unknown players are ignored."""
        self.turns.set_current(player)

    # Round and match progression

    def advance_round(self) -> None:
        """Move to the next round.

        Once the deck is exhausted on or after the last scheduled round,
        the match is finalized instead.

        Raises:
            InvalidOperationError: If the match is finished, or (when
                finalizing) if finalize() rejects the end state.
        """
        if self.is_finished:
            raise InvalidOperationError("The match is finished")
        if self.deck.is_empty() and self.state.round_number >= self.rules.final_round:
            self.finalize()
            return

        self.state.start_next_round()
        self.turns.reset()
        self.turns.set_current(self._player1)

        logger.info(f"Advanced to round {self.state.round_number}")
        if self.match_logger:
            self.match_logger.log_round_advance(self.state.round_number, len(self.deck))

    def finalize(self) -> None:
        """Close the match.

        Leftover table cards go to the last player who captured, or to the
        current turn owner if nobody ever captured.

        Raises:
            InvalidOperationError: If the match is already finished, a hand
                still holds cards, or the leftover table sum is unreachable.
        """
        if self.is_finished:
            raise InvalidOperationError("The match is already finished")
        if self._player1.hand or self._player2.hand:
            raise InvalidOperationError(
                "Hands must be empty to finish the match"
            )
        validation = self.validator.validate_final_table(self.table.cards())
        if not validation.is_valid:
            raise InvalidOperationError(validation.error_message)

        receiver: Player | None = None
        swept: list[Card] = []
        if not self.table.is_empty():
            receiver = self._last_capturer or self.turns.current
            swept = self.table.sweep_to(receiver)
            logger.info(f"{receiver.name} takes the {len(swept)} cards left on the table")

        self.state.phase = MatchPhase.FINISHED
        points = {p.name: self.final_score(p) for p in self.players}
        logger.info(f"Match finished: {points}")

        if self.match_logger:
            self.match_logger.log_match_end(
                self.state.round_number, receiver, swept, points
            )

    # Scoring

    def _opponent(self, player: Player) -> Player:
        if player is self._player1:
            return self._player2
        if player is self._player2:
            return self._player1
        raise InvalidArgumentError(f"{player} is not playing this match")

    def score_breakdown(self, player: Player) -> ScoreBreakdown:
        """Itemized points of a player."""
        return score_breakdown(player, self._opponent(player))

    def final_score(self, player: Player) -> int:
        """Total points of a player.

        Pure function of both captured piles and broom counts.
        """
        return self.score_breakdown(player).total

    def summary(self, match_id: str, played_on: date | None = None) -> MatchSummary:
        """Build the match summary for storage or display."""
        return MatchSummary(
            match_id=match_id,
            played_on=played_on or date.today(),
            player1=PlayerResult.from_player(self._player1, self.final_score(self._player1)),
            player2=PlayerResult.from_player(self._player2, self.final_score(self._player2)),
            complete=self.is_finished,
        )

    def _log_deal(self) -> None:
        if self.match_logger:
            self.match_logger.log_deal(
                self.state.round_number,
                self.players,
                self.table.cards(),
                len(self.deck),
            )

    def __str__(self) -> str:
        return f"{self.state}, {self.current_player.name}'s turn, {self.table}"
