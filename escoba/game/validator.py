"""Move validation for submitted plays."""

from dataclasses import dataclass

from escoba.config import RulesConfig
from escoba.models.card import Card, cards_value


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""
    is_capture: bool = False
    is_broom: bool = False


class MoveValidator:
    """Validates plays and captures against the table."""

    def __init__(self, rules: RulesConfig | None = None):
        """Initialize validator.

        Args:
            rules: Rules configuration (uses defaults if not provided)
        """
        self.rules = rules or RulesConfig()

    def validate_play(
        self,
        card: Card,
        capture: list[Card],
        hand: list[Card],
        table: list[Card],
    ) -> ValidationResult:
        """Validate a play.

        Args:
            card: Card being played
            capture: Table cards the player wants to capture (may be empty)
            hand: Acting player's hand
            table: Cards currently on the table

        Returns:
            ValidationResult
        """
        if card not in hand:
            return ValidationResult(
                is_valid=False,
                error_message=f"Player does not hold {card}",
            )

        # Dropping a card on the table is always allowed
        if not capture:
            return ValidationResult(is_valid=True)

        return self._validate_capture(card, capture, table)

    def _validate_capture(
        self,
        card: Card,
        capture: list[Card],
        table: list[Card],
    ) -> ValidationResult:
        """Check the capture arithmetic and detect an escoba.

        Args:
            card: Card being played
            capture: Non-empty list of table cards to capture
            table: Cards currently on the table

        Returns:
            ValidationResult
        """
        for c in capture:
            if c not in table:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Card {c} is not on the table",
                )

        if len(set(capture)) != len(capture):
            return ValidationResult(
                is_valid=False,
                error_message="Capture lists the same card twice",
            )

        total = card.value + cards_value(capture)
        if total != self.rules.capture_target:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cards do not add up to {self.rules.capture_target} "
                    f"(they add up to {total})"
                ),
            )

        return ValidationResult(
            is_valid=True,
            is_capture=True,
            is_broom=set(capture) == set(table),
        )

    def validate_final_table(self, table: list[Card]) -> ValidationResult:
        """Check that the cards left on the table at match end are reachable.

        Args:
            table: Cards left on the table

        Returns:
            ValidationResult
        """
        if not table:
            return ValidationResult(is_valid=True)

        total = cards_value(table)
        if total not in self.rules.valid_final_sums:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid final table sum: {total}",
            )
        return ValidationResult(is_valid=True)
