import logging

import pytest

from ecrtag import main as main_module
from ecrtag.registry import ContainerRegistry, RegistryConfig

from .registry._providers import (
    InMemoryRegistry,
    ScriptedSelector,
    sample_registry,
)


@pytest.fixture
def run_main(monkeypatch):
    configs: list[RegistryConfig] = []

    def run(provider, choices):
        def from_config(cls, config):
            configs.append(config)
            return ContainerRegistry(__provider__=provider)

        monkeypatch.setattr(
            main_module.ContainerRegistry,
            "from_config",
            classmethod(from_config),
        )
        monkeypatch.setattr(
            "ecrtag.retag.TerminalSelector",
            lambda: ScriptedSelector(choices),
        )
        main_module.main()
        return configs

    yield run
    logger = logging.getLogger("ecrtag")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_success(run_main, capsys):
    provider = sample_registry()
    run_main(provider, [0, 0])
    assert capsys.readouterr().out.strip() == "Tagged api@b as latest"
    assert provider.published[0][2] == "latest"
    assert provider.closed


def test_config_comes_from_environment(run_main, monkeypatch):
    monkeypatch.setattr("sys.argv", ["ecrtag", "anything", "--region", "x"])
    configs = run_main(sample_registry(), [0, 0])
    assert configs == [RegistryConfig()]
    assert configs[0].get_provider_parameters() == {}


def test_empty_registry_exits_non_zero(run_main, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(InMemoryRegistry(), [])
    assert exc_info.value.code == 1
    assert "No repositories" in capsys.readouterr().err


def test_cancel_exits_non_zero(run_main, capsys):
    provider = sample_registry()
    with pytest.raises(SystemExit) as exc_info:
        run_main(provider, [None])
    assert exc_info.value.code == 130
    assert "cancelled" in capsys.readouterr().err
    assert provider.calls == ["list_repositories"]


def test_logging_defaults_to_warning(run_main):
    run_main(sample_registry(), [0, 0])
    assert logging.getLogger("ecrtag").level == logging.WARNING
