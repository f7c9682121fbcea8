# Path: pod_verifier/tests/test_config.py
"""
Unit tests for the .env-backed configuration loader.
"""

from pathlib import Path

import pytest

from pod_verifier.constants import MAX_INPUT_LENGTH
from pod_verifier.core.config_loader import ConfigLoader
from pod_verifier.engine.processors import VerificationOrchestrator
from pod_verifier.tests.fixtures import FakeEngine


CONFIG_VARS = [
    'POD_VERIFIER_ENVIRONMENT',
    'POD_VERIFIER_DEBUG',
    'POD_VERIFIER_LOG_DIR',
    'POD_VERIFIER_LOG_LEVEL',
    'POD_VERIFIER_MAX_INPUT_LENGTH',
    'POD_VERIFIER_ENGINE',
    'POD_VERIFIER_SHARE_BASE_URL',
    'POD_VERIFIER_SHARE_PARAM',
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset all verifier variables and give each test a fresh loader."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    ConfigLoader.reset()
    yield monkeypatch
    ConfigLoader.reset()


def test_defaults(clean_env):
    config = ConfigLoader()

    assert config.get('environment') == 'development'
    assert config.get('debug') is False
    assert config.get('log_dir') is None
    assert config.get('log_level') == 'INFO'
    assert config.get('max_input_length') == MAX_INPUT_LENGTH
    assert config.get('engine') is None
    assert config.get('share_base_url') == 'http://localhost:5173/'
    assert config.get('share_param') == 'pod'


def test_environment_overrides(clean_env):
    clean_env.setenv('POD_VERIFIER_DEBUG', 'yes')
    clean_env.setenv('POD_VERIFIER_LOG_DIR', '/tmp/pod-logs')
    clean_env.setenv('POD_VERIFIER_MAX_INPUT_LENGTH', '2048')
    clean_env.setenv('POD_VERIFIER_ENGINE', 'my_engine:create')
    clean_env.setenv('POD_VERIFIER_SHARE_PARAM', 'record')

    config = ConfigLoader()

    assert config.get('debug') is True
    assert config.get('log_dir') == Path('/tmp/pod-logs')
    assert config.get('max_input_length') == 2048
    assert config['engine'] == 'my_engine:create'
    assert config.get('share_param') == 'record'


def test_blank_values_fall_back_to_defaults(clean_env):
    clean_env.setenv('POD_VERIFIER_ENGINE', '   ')
    clean_env.setenv('POD_VERIFIER_LOG_LEVEL', '')

    config = ConfigLoader()

    assert config.get('engine') is None
    assert config.get('log_level') == 'INFO'


def test_bad_integer_uses_default(clean_env):
    clean_env.setenv('POD_VERIFIER_MAX_INPUT_LENGTH', 'lots')
    assert ConfigLoader().get('max_input_length') == MAX_INPUT_LENGTH


def test_singleton(clean_env):
    assert ConfigLoader() is ConfigLoader()
    assert 'engine' in ConfigLoader()
    assert 'max_input_length' in set(ConfigLoader().keys())


def test_orchestrator_reads_input_limit(clean_env):
    clean_env.setenv('POD_VERIFIER_MAX_INPUT_LENGTH', '5')
    orchestrator = VerificationOrchestrator(FakeEngine(), config=ConfigLoader())

    assert orchestrator.max_input_length == 5
    assert VerificationOrchestrator(FakeEngine(), ConfigLoader(), 7).max_input_length == 7
