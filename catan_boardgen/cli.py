from __future__ import annotations

import json
import time
from typing import Any, Dict, List

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, TimeRemainingColumn
from rich.table import Table

from catan_boardgen.domain.board import Board, Terrain, is_high_probability
from catan_boardgen.generation.assembly import board_fairness, generate_board
from catan_boardgen.generation.types import (
    BoardConfig,
    DesertPlacement,
    FairnessReport,
    NumberPlacement,
    PortPlacement,
    TerrainPlacement,
)
from catan_boardgen.utils.logging import setup_logging

PLAYER_CHOICES = ["small", "large", "3-4", "5-6"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

TERRAIN_STYLES = {
    Terrain.WOOD: "green4",
    Terrain.BRICK: "red3",
    Terrain.WHEAT: "yellow3",
    Terrain.SHEEP: "chartreuse3",
    Terrain.ORE: "grey58",
    Terrain.DESERT: "tan",
}


def _values(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def _format_number(number: int | None) -> str:
    if number is None:
        return "-"
    if is_high_probability(number):
        return f"[bold red]{number}[/bold red]"
    return str(number)


def _tile_table(board: Board) -> Table:
    table = Table(title=f"Tiles ({board.player_count.value} board)")
    table.add_column("Id", justify="right")
    table.add_column("q", justify="right")
    table.add_column("r", justify="right")
    table.add_column("Terrain")
    table.add_column("Number", justify="right")
    for tile in board.tiles:
        style = TERRAIN_STYLES[tile.terrain]
        table.add_row(
            str(tile.id),
            str(tile.q),
            str(tile.r),
            f"[{style}]{tile.terrain.label}[/{style}]",
            _format_number(tile.number),
        )
    return table


def _port_table(board: Board) -> Table:
    table = Table(title="Ports")
    table.add_column("Id", justify="right")
    table.add_column("q", justify="right")
    table.add_column("r", justify="right")
    table.add_column("Facing", justify="right")
    table.add_column("Type")
    for port in board.ports:
        table.add_row(str(port.id), str(port.q), str(port.r), str(port.facing), port.port_type.label)
    return table


def _fairness_table(report: FairnessReport) -> Table:
    table = Table(title="Fairness")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Terrain score", f"{report.terrain_score:.1f}")
    table.add_row("Number score", f"{report.number_score:.1f}")
    table.add_row("6/8 separated", "yes" if report.high_tokens_separated else "no")
    for terrain, total in report.pip_totals.items():
        table.add_row(f"{terrain} pips", str(total))
    return table


def _config_from_options(
    players: str,
    desert: str,
    terrain: str,
    numbers: str,
    ports: str,
) -> BoardConfig:
    return BoardConfig.from_mapping(
        {
            "player_count": players,
            "desert_placement": desert,
            "terrain_placement": terrain,
            "number_placement": numbers,
            "port_placement": ports,
        }
    )


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity (records go to stderr).",
)
def cli(log_level: str) -> None:
    """Generate fair hexagonal Catan board layouts."""
    setup_logging(level=log_level)


@cli.command()
@click.option("--players", default="small", show_default=True, type=click.Choice(PLAYER_CHOICES))
@click.option(
    "--desert",
    default=DesertPlacement.CENTER.value,
    show_default=True,
    type=click.Choice(_values(DesertPlacement)),
)
@click.option(
    "--terrain",
    default=TerrainPlacement.BALANCED.value,
    show_default=True,
    type=click.Choice(_values(TerrainPlacement)),
)
@click.option(
    "--numbers",
    default=NumberPlacement.BALANCED.value,
    show_default=True,
    type=click.Choice(_values(NumberPlacement)),
)
@click.option(
    "--ports",
    default=PortPlacement.FIXED.value,
    show_default=True,
    type=click.Choice(_values(PortPlacement)),
)
@click.option("--seed", default=None, type=int, help="Seed for a reproducible board.")
@click.option("--json", "as_json", is_flag=True, help="Print the board as JSON instead of tables.")
def generate(
    players: str,
    desert: str,
    terrain: str,
    numbers: str,
    ports: str,
    seed: int | None,
    as_json: bool,
) -> None:
    """Generate one board and print it."""
    config = _config_from_options(players, desert, terrain, numbers, ports)
    board = generate_board(config, seed=seed)

    if as_json:
        payload = board.to_dict()
        payload["config"] = config.to_dict()
        click.echo(json.dumps(payload, indent=2))
        return

    console = Console()
    console.print(_tile_table(board))
    console.print(_port_table(board))
    console.print(_fairness_table(board_fairness(board)))
    if seed is not None:
        console.print(f"Seed: {seed}")


@cli.command()
@click.option("--players", default="small", show_default=True, type=click.Choice(PLAYER_CHOICES))
@click.option(
    "--boards",
    default=20,
    show_default=True,
    type=click.IntRange(1, None),
    help="Boards generated per placement policy.",
)
@click.option("--seed-start", default=0, show_default=True, type=int)
def compare(players: str, boards: int, seed_start: int) -> None:
    """Compare balanced and random placement over many boards.

    Both policies use the same seeds, so differences come from the policy
    and not from the shuffle.
    """
    console = Console()
    policies = (TerrainPlacement.BALANCED, TerrainPlacement.RANDOM)

    rows: List[Dict[str, Any]] = []
    started = time.time()
    with Progress(
        "[progress.description]{task.description}",
        BarColumn(),
        "[progress.percentage]{task.percentage:>3.0f}%",
        TimeRemainingColumn(),
        console=console,
    ) as progress:
        bar = progress.add_task("Generating...", total=boards * len(policies))
        for policy in policies:
            config = _config_from_options(
                players,
                DesertPlacement.CENTER.value,
                policy.value,
                policy.value,
                PortPlacement.FIXED.value,
            )
            reports = []
            for offset in range(boards):
                reports.append(board_fairness(generate_board(config, seed=seed_start + offset)))
                progress.update(bar, advance=1)
            rows.append(
                {
                    "policy": policy.value,
                    "terrain_score": sum(r.terrain_score for r in reports) / len(reports),
                    "number_score": sum(r.number_score for r in reports) / len(reports),
                    "separated": sum(1 for r in reports if r.high_tokens_separated) / len(reports),
                }
            )
    elapsed = time.time() - started

    table = Table(title=f"Placement comparison ({boards} boards per policy)")
    table.add_column("Policy")
    table.add_column("Avg terrain score", justify="right")
    table.add_column("Avg number score", justify="right")
    table.add_column("6/8 separated", justify="right")
    for row in rows:
        table.add_row(
            row["policy"],
            f"{row['terrain_score']:.1f}",
            f"{row['number_score']:.1f}",
            f"{100.0 * row['separated']:.1f}%",
        )
    console.print(table)
    console.print(f"[green]Done.[/green] Runtime: {elapsed:.2f}s")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
