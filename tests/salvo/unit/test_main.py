import logging

import pytest

from salvo import main as main_module
from salvo.infra.config import AgentConfig


@pytest.fixture
def isolated_run(monkeypatch, tmp_path):
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SALVO_APP_DATA_DIR", str(tmp_path / "appdata"))
    for key in ("SALVO_LOG_DIR", "SALVO_BOARD_SIZE", "SALVO_FLEET", "SALVO_SEED"):
        monkeypatch.delenv(key, raising=False)
    yield tmp_path
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


def test_resolve_config_overlays_cli_arguments() -> None:
    args = main_module.build_parser().parse_args(["--board-size", "8", "--fleet", "3,2", "--seed", "5"])
    config = main_module.resolve_config(args, AgentConfig())
    assert config.board_size == 8
    assert config.fleet == (3, 2)
    assert config.seed == 5


def test_resolve_config_keeps_env_values_without_arguments() -> None:
    base = AgentConfig(board_size=12, seed=9, fleet=(4,))
    config = main_module.resolve_config(main_module.build_parser().parse_args([]), base)
    assert config == base


def test_main_prints_one_line_per_ship(isolated_run, capsys) -> None:
    exit_code = main_module.main(["--board-size", "8", "--fleet", "4,3,2", "--seed", "7"])
    assert exit_code == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Ship")]
    assert [line.split(":", 1)[0] for line in lines] == ["Ship0", "Ship1", "Ship2"]
    assert lines[0].endswith("length=4")
    assert list((isolated_run / "appdata" / "logs").glob("salvo_run_*.jsonl"))


def test_main_is_deterministic_for_a_seed(isolated_run, capsys) -> None:
    main_module.main(["--seed", "11"])
    first = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Ship")]
    main_module.main(["--seed", "11"])
    second = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Ship")]
    assert first == second
    assert len(first) == 5
