"""Rich table formatting for terminal output."""

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from holdem_sim.models.card import Card, Rank
from holdem_sim.models.player import Player
from holdem_sim.agents.preflop import PreflopMove, PreflopPolicyTable
from holdem_sim.simulation.engine import RoundResult
from holdem_sim.simulation.evaluator import best_hand_label

MOVE_STYLES = {
    PreflopMove.RAISE: "green",
    PreflopMove.CALL: "yellow",
    PreflopMove.FOLD: "red",
}


class TableFormatter:
    """Format simulator data as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_standings(self, players: Sequence[Player], starting_bank: Optional[int] = None) -> None:
        """Print bankrolls as a Rich table, richest first."""
        table = Table(title="Standings")
        table.add_column("Player", style="cyan")
        table.add_column("Bankroll", justify="right", style="green")
        if starting_bank is not None:
            table.add_column("Profit", justify="right")

        for player in sorted(players, key=lambda p: p.bankroll, reverse=True):
            name = f"{player.name} [dim](you)[/dim]" if player.is_human else player.name
            row = [name, f"${player.bankroll}"]
            if starting_bank is not None:
                profit = player.bankroll - starting_bank
                color = "green" if profit > 0 else "red" if profit < 0 else "white"
                row.append(f"[{color}]{profit:+d}[/{color}]")
            table.add_row(*row)

        self.console.print(table)

    def print_showdown(self, result: RoundResult, players: Sequence[Player]) -> None:
        """Print each player's cards, hand and payout for a finished round."""
        board = " ".join(str(c) for c in result.state.community) or "-"
        table = Table(title=f"Showdown  |  Pot: ${result.pot}  |  Board: {board}")
        table.add_column("Player", style="cyan")
        table.add_column("Cards")
        table.add_column("Hand")
        table.add_column("Score", justify="right")
        table.add_column("Won", justify="right", style="green")

        winners = {id(p) for p in result.winners}
        for player in players:
            score = player.score()
            hand = "[dim]folded[/dim]" if player.has_folded else best_hand_label(score)
            name = f"[bold]{player.name}[/bold]" if id(player) in winners else player.name
            won = result.settlement.total_for(player)
            table.add_row(
                name,
                " ".join(str(c) for c in player.hand.opening_hand),
                hand,
                f"{score:.4f}",
                f"${won}" if won else "",
            )

        self.console.print(table)

    def print_evaluation(self, cards: Sequence[Card], hand_score: float) -> None:
        """Print a scored hand as a panel."""
        self.console.print(Panel(
            f"[bold]{best_hand_label(hand_score)}[/bold]\nScore: {hand_score:.4f}",
            title=" ".join(str(c) for c in cards),
            style="cyan",
        ))

    def print_preflop_chart(self, policy: PreflopPolicyTable) -> None:
        """Print the whole lookup table as a 13x13 grid.

        Suited hands are above the diagonal, offsuit hands below it.
        """
        ranks = sorted(Rank, reverse=True)
        table = Table(title="Pre-flop Chart (suited above the diagonal)", show_lines=False)
        table.add_column("", style="bold")
        for rank in ranks:
            table.add_column(rank.char, justify="center")

        for row_rank in ranks:
            cells = []
            for col_rank in ranks:
                high, low = max(row_rank, col_rank), min(row_rank, col_rank)
                move = policy.lookup(high, low, suited=col_rank < row_rank)
                style = MOVE_STYLES[move]
                cells.append(f"[{style}]{move.value[0]}[/{style}]")
            table.add_row(row_rank.char, *cells)

        self.console.print(table)
