"""
Pytest configuration and fixtures for faultdemo tests.
"""

import pytest
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import Config
from core.demonstrator import FaultDemonstrator
from core.reporters import JsonReporter


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from a clean, empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(tmp_path):
    """Config whose triggers all point inside tmp_path and fail deterministically."""
    cfg = Config()
    cfg.set('restricted_write_path', str(tmp_path / 'restricted' / 'test.txt'))
    cfg.set('missing_file_path', str(tmp_path / 'nonexistent.txt'))
    cfg.set('data_file_path', str(tmp_path / 'test.dat'))
    cfg.set('database_url', f"sqlite:///{tmp_path / 'missing' / 'demo.db'}")
    cfg.set('database_connect_timeout', 1)
    cfg.set('log_folder', str(tmp_path / 'logs'))
    return cfg


@pytest.fixture
def recorder():
    """Reporter that keeps everything it is given."""
    return JsonReporter()


@pytest.fixture
def demonstrator(config, recorder):
    return FaultDemonstrator(config, reporter=recorder)
