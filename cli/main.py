"""Hold'em Sim CLI: Typer-based command line interface."""

from typing import List, Optional

import typer
from rich.console import Console

from holdem_sim import config

app = typer.Typer(
    name="holdem-sim",
    help="Texas Hold'em round simulator",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(log_level: str):
    from holdem_sim.observability.logger import setup_logging
    try:
        setup_logging(log_level)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _build_table(opponents: int):
    from holdem_sim.models.simulation import TableConfig
    try:
        return TableConfig(num_opponents=opponents)
    except ValueError as e:
        console.print(f"[red]Invalid table settings:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def play(
    name: str = typer.Option(..., "--name", "-n", prompt="Please enter your name",
                             help="Your name at the table"),
    opponents: int = typer.Option(config.NUM_OPPONENTS, "--opponents", "-o", min=1, max=32,
                                  help="Number of AI opponents"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    fast: bool = typer.Option(False, "--fast", help="Print narration without pacing"),
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", help="Log level"),
):
    """Play a game against AI opponents."""
    from holdem_sim.agents.decision import AIDecisionEngine
    from holdem_sim.agents.factory import OpponentFactory
    from holdem_sim.agents.preflop import get_preflop_table
    from holdem_sim.collaborators import StdRandomSource
    from holdem_sim.formatters.table import TableFormatter
    from holdem_sim.simulation.session import GameSession
    from cli.console import ConsoleInput, ConsoleOutput

    _setup_logging(log_level)
    table = _build_table(opponents)
    rng = StdRandomSource(seed)

    output = ConsoleOutput(console, 0, 0, 0) if fast else ConsoleOutput(console)
    input_source = ConsoleInput(console)

    output.display("Hi! This is a program that simulates a game of Texas Hold 'em!")
    output.display("The game will continue until you cash out, are eliminated, or are the last person left")
    output.display("This program is designed for one player; your opponents are all pre-programmed AI")
    output.display(f"Hi {name}! It's time to get your game on, good luck!")
    output.display("")

    factory = OpponentFactory(rng, table)
    players = factory.create_players(name)
    engine = AIDecisionEngine(get_preflop_table(), rng, table.ai_raise, table.ai_bluff)
    agents = factory.create_agents(players, engine, input_source, output)

    session = GameSession(players, agents, rng, table, input_source, output)
    session.run()

    console.print()
    console.print(f"[bold]{session.result_message()}[/bold]")
    TableFormatter(console).print_standings(session.players, table.starting_bank)


@app.command()
def simulate(
    players: int = typer.Option(5, "--players", "-p", min=2, max=32,
                                help="Number of AI players"),
    rounds: int = typer.Option(10, "--rounds", "-r", min=1, help="Maximum rounds"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the final standings"),
    showdowns: bool = typer.Option(False, "--showdowns", help="Print every round's showdown"),
    plain: bool = typer.Option(False, "--plain", help="Plain text instead of tables"),
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", help="Log level"),
):
    """Run an all-AI game and print the standings."""
    from holdem_sim.agents.decision import AIDecisionEngine
    from holdem_sim.agents.factory import OpponentFactory
    from holdem_sim.agents.preflop import get_preflop_table
    from holdem_sim.collaborators import NullOutput, StdRandomSource
    from holdem_sim.formatters.table import TableFormatter
    from holdem_sim.formatters.text import TextFormatter
    from holdem_sim.simulation.session import GameSession
    from cli.console import ConsoleOutput

    _setup_logging(log_level)
    table = _build_table(players)
    rng = StdRandomSource(seed)
    output = NullOutput() if quiet else ConsoleOutput(console, 0, 0, 0)

    factory = OpponentFactory(rng, table)
    seated = factory.create_players(None)
    engine = AIDecisionEngine(get_preflop_table(), rng, table.ai_raise, table.ai_bluff)
    agents = factory.create_agents(seated, engine)

    text_fmt = TextFormatter()
    table_fmt = TableFormatter(console)

    def show_round(result, round_players):
        if plain:
            console.print(text_fmt.format_round(result, round_players), markup=False)
        else:
            table_fmt.print_showdown(result, round_players)

    session = GameSession(seated, agents, rng, table, output=output, max_rounds=rounds,
                          on_round=show_round if showdowns else None)
    outcome = session.run()

    if plain:
        console.print(f"\n{session.result_message()} ({outcome.value})", markup=False)
        console.print(text_fmt.format_standings(session.players), markup=False)
    else:
        console.print(f"\n[bold]{session.result_message()}[/bold] [dim]({outcome.value})[/dim]")
        table_fmt.print_standings(session.players, table.starting_bank)


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="2-7 cards, e.g. As Kd 10h"),
    plain: bool = typer.Option(False, "--plain", help="Plain text instead of a panel"),
):
    """Score a hand and name its category."""
    from holdem_sim.models.card import Card
    from holdem_sim.simulation.evaluator import score
    from holdem_sim.formatters.table import TableFormatter
    from holdem_sim.formatters.text import TextFormatter

    try:
        parsed = [Card.parse(c) for c in cards]
        hand_score = score(parsed)
    except ValueError as e:
        console.print(f"[red]Cannot evaluate hand:[/red] {e}")
        raise typer.Exit(1)

    if plain:
        console.print(TextFormatter().format_evaluation(parsed, hand_score), markup=False)
    else:
        TableFormatter(console).print_evaluation(parsed, hand_score)


@app.command()
def preflop(
    high: Optional[str] = typer.Argument(None, help="First hole card rank, e.g. A"),
    low: Optional[str] = typer.Argument(None, help="Second hole card rank, e.g. 10"),
    suited: bool = typer.Option(False, "--suited", "-s", help="Cards share a suit"),
):
    """Show the AI's pre-flop move for an opening hand, or the whole chart."""
    from holdem_sim.agents.preflop import get_preflop_table
    from holdem_sim.formatters.table import TableFormatter
    from holdem_sim.models.card import Rank

    policy = get_preflop_table()

    if high is None and low is None:
        TableFormatter(console).print_preflop_chart(policy)
        return
    if high is None or low is None:
        console.print("[red]Give both ranks, or neither to see the chart.[/red]")
        raise typer.Exit(1)

    try:
        first, second = Rank.from_char(high), Rank.from_char(low)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if first == second and suited:
        console.print("[red]A pair can't be suited.[/red]")
        raise typer.Exit(1)

    move = policy.lookup(first, second, suited)
    top, bottom = max(first, second), min(first, second)
    kind = "suited" if suited else "offsuit"
    console.print(f"{top.char}{bottom.char} {kind}: [bold]{move.value}[/bold]")


if __name__ == "__main__":
    app()
