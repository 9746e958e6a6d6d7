"""Fixtures partagées : uname, commandes externes et environnement simulés."""

import logging

import pytest

from smoke_sysinfo.collectors.base import BaseCollector
from smoke_sysinfo.core.logger import LOGGER_NAME


class FakeCommands:
    """
    Sorties de commandes simulées

    Une commande sans sortie enregistrée se comporte comme une commande
    introuvable (sortie vide).
    """

    def __init__(self):
        self.outputs = {}
        self.calls = []

    def __setitem__(self, command, output):
        self.outputs[command] = output

    def run(self, command):
        self.calls.append(command)
        return self.outputs.get(command, '').splitlines()


@pytest.fixture
def fake_uname(monkeypatch):
    """Remplace uname par des valeurs fixes ; retourne une fonction pour les changer."""
    values = {'machine': 'x86_64', 'node': 'smokehost'}

    monkeypatch.setattr(BaseCollector, '_uname', lambda self: (values['machine'], values['node']))

    def set_uname(machine='x86_64', node='smokehost'):
        values['machine'] = machine
        values['node'] = node

    return set_uname


@pytest.fixture
def fake_commands(monkeypatch):
    commands = FakeCommands()
    monkeypatch.setattr(BaseCollector, '_execute_command', lambda self, command: commands.run(command))
    return commands


@pytest.fixture
def clean_windows_env(monkeypatch):
    for name in ('PROCESSOR_ARCHITECTURE', 'PROCESSOR_IDENTIFIER', 'NUMBER_OF_PROCESSORS'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_logger():
    """Retire les handlers du logger de l'application avant et après le test."""
    logger = logging.getLogger(LOGGER_NAME)

    def clear():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    clear()
    yield logger
    clear()
