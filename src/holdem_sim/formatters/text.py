"""Plain text formatting for terminal output."""

from typing import List, Sequence

from holdem_sim.models.card import Card
from holdem_sim.models.player import Player
from holdem_sim.simulation.engine import RoundResult
from holdem_sim.simulation.evaluator import best_hand_label


class TextFormatter:
    """Format simulator data as plain text for terminal display."""

    def format_cards(self, cards: Sequence[Card]) -> str:
        return " ".join(str(c) for c in cards)

    def format_evaluation(self, cards: Sequence[Card], hand_score: float) -> str:
        """Format a scored hand."""
        return (f"{self.format_cards(cards)}  ->  {best_hand_label(hand_score)} "
                f"(score {hand_score:.4f})")

    def format_round(self, result: RoundResult, players: Sequence[Player]) -> str:
        """Format a finished round."""
        lines: List[str] = []
        lines.append(f"=== Pot: ${result.pot} ===")
        if result.state.community:
            lines.append(f"Board: {self.format_cards(result.state.community)}")

        for player in players:
            status = "folded" if player.has_folded else player.hand.label()
            won = result.settlement.total_for(player)
            won_str = f"  +${won}" if won else ""
            lines.append(f"  {player.name}: {self.format_cards(player.hand.opening_hand)} "
                         f"{status}{won_str}")

        lines.append(f"Winner(s): {', '.join(p.name for p in result.winners)}")
        return "\n".join(lines)

    def format_standings(self, players: Sequence[Player]) -> str:
        """Format bankrolls, richest first."""
        lines = ["=== Standings ==="]
        for player in sorted(players, key=lambda p: p.bankroll, reverse=True):
            tag = " (you)" if player.is_human else ""
            lines.append(f"  {player.name}{tag}: ${player.bankroll}")
        return "\n".join(lines)
