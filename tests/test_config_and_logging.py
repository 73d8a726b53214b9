import json
from pathlib import Path

from guessing_game.config import config, DIFFICULTY_SETTINGS, validate_difficulty_settings
from guessing_game.utils.game_logger import GameLogger
from guessing_game.utils.helpers import parse_int_prefix


def test_difficulty_settings_are_valid():
    assert validate_difficulty_settings() is True
    assert DIFFICULTY_SETTINGS['easy'] == {'min': 1, 'max': 50, 'name': 'Easy (1-50)'}
    assert DIFFICULTY_SETTINGS['hard']['max'] == 200


def test_config_mapping():
    assert config['testing'].TESTING is True
    assert config['testing'].STORAGE_PATH == ''
    assert config['default'] is config['development']


def test_parse_int_prefix():
    assert parse_int_prefix(' -12px') == -12
    assert parse_int_prefix('7') == 7
    assert parse_int_prefix('+') is None
    assert parse_int_prefix('x1') is None
    assert parse_int_prefix(False) is None
    assert parse_int_prefix('000000000000000000000042') == 42
    assert parse_int_prefix('9' * 5000) is None
    assert parse_int_prefix('9' * 19) is None
    assert parse_int_prefix('9' * 18) == int('9' * 18)


def test_logger_writes_json_lines_without_passwords(tmp_path):
    logger = GameLogger(str(tmp_path))
    logger.log_game_event('user_registered', username='Alice', user={'email': 'a@b.c', 'password': 'pw'})

    stats = logger.get_log_stats()
    assert stats['game_events'] == 1

    line = Path(stats['log_file']).read_text(encoding='utf-8').strip()
    entry = json.loads(line.split(' | ', 2)[2])
    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['user']['username'] == 'Alice'
    assert entry['details']['user'] == {'email': 'a@b.c'}

    logger.configure(None)


def test_logger_without_directory_reports_disabled():
    logger = GameLogger()
    assert 'error' in logger.get_log_stats()
