"""Command-line entry point: place a fleet and print the placement messages."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from arena.api.logging import get_logger
from arena.runtime.logging import shutdown_arena_logging
from salvo.ai.sweep_player import SweepPlayer
from salvo.app.player_adapter import ContestPlayer
from salvo.infra.config import AgentConfig, load_agent_config, load_default_env_files, parse_fleet
from salvo.infra.logging import setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Place a fleet with the sweep player.")
    parser.add_argument("--board-size", type=int, default=None, help="board size (default: SALVO_BOARD_SIZE)")
    parser.add_argument("--fleet", type=str, default=None, help="comma-separated ship lengths, e.g. 5,4,3,3,2")
    parser.add_argument("--seed", type=int, default=None, help="random seed (default: SALVO_SEED)")
    return parser


def resolve_config(args: argparse.Namespace, base: AgentConfig) -> AgentConfig:
    """Overlay CLI arguments on the env-derived configuration."""
    fleet = parse_fleet(args.fleet) if args.fleet else base.fleet
    return AgentConfig(
        board_size=args.board_size if args.board_size is not None else base.board_size,
        max_board_size=base.max_board_size,
        min_ship_length=base.min_ship_length,
        placement_attempts=base.placement_attempts,
        seed=args.seed if args.seed is not None else base.seed,
        fleet=fleet or base.fleet,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the placement preview."""
    args = build_parser().parse_args(argv)
    load_default_env_files(override_existing=False)
    setup_logging()
    config = resolve_config(args, load_agent_config())
    logger.info(
        "agent_config board_size=%d fleet=%s seed=%s",
        config.board_size,
        ",".join(str(length) for length in config.fleet),
        config.seed,
    )
    try:
        contest_player = ContestPlayer(SweepPlayer.from_config(config, random.Random(config.seed)))
        contest_player.new_round()
        for length in config.fleet:
            message = contest_player.place_ship(length)
            print(
                f"{message.text}: row={message.row} col={message.col} "
                f"direction={message.direction.value} length={message.length}"
            )
    finally:
        shutdown_arena_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
