"""
Fixtures partagées pour les tests TempHarvest
"""

import logging
import subprocess

import pytest

from tempharvest.core.config import HarvestConfig


SENSORS_OUTPUT = """\
iwlwifi_1-virtual-0
Adapter: Virtual device
temp1:
  temp1_input: 39.000

nvme-pci-0100
Adapter: PCI adapter
Composite:
  temp1_input: 41.850
  temp1_max: 81.850
Sensor 1:
  temp2_input: 38.850

k10temp-pci-00c3
Adapter: PCI adapter
Tctl:
  temp1_input: 52.625

it8686-isa-0a40
Adapter: ISA adapter
in0:
  in0_input: 1.248
fan1:
  fan1_input: 1205.000
temp1:
  temp1_input: 33.000

acpitz-acpi-0
Adapter: ACPI interface
temp1:
  temp1_input: 27.800
"""


@pytest.fixture
def logger():
    return logging.getLogger('tempharvest-tests')


@pytest.fixture
def config(tmp_path):
    """Configuration par défaut (fichier absent)"""
    return HarvestConfig(str(tmp_path / 'absent.ini'))


@pytest.fixture
def fake_run(monkeypatch):
    """
    Remplace subprocess.run par une sortie contrôlée

    Retourne une fonction qui enregistre la sortie (bytes), le code de
    retour ou l'exception à simuler, et la liste des appels reçus.
    """
    calls = []
    state = {'stdout': b'', 'returncode': 0, 'error': None}

    def _run(args, **kwargs):
        calls.append((list(args), kwargs))
        if state['error'] is not None:
            raise state['error']
        return subprocess.CompletedProcess(args, state['returncode'], stdout=state['stdout'], stderr=b'')

    monkeypatch.setattr('tempharvest.collectors.base.subprocess.run', _run)

    def _configure(stdout=b'', returncode=0, error=None):
        if isinstance(stdout, str):
            stdout = stdout.encode('utf-8')
        state.update(stdout=stdout, returncode=returncode, error=error)
        return calls

    return _configure
