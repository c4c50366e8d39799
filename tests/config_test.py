import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from htmldiff.config import DiffConfig


def test_defaults():
    config = DiffConfig()
    assert config.parser == 'html.parser'
    assert config.max_depth == 256
    assert config.output_format == 'text'


def test_from_env():
    config = DiffConfig.from_env({
        'HTMLDIFF_PARSER': 'html.parser',
        'HTMLDIFF_MAX_DEPTH': '32',
        'HTMLDIFF_FORMAT': 'json',
    })
    assert config.max_depth == 32
    assert config.output_format == 'json'


def test_from_env_empty():
    assert DiffConfig.from_env({}) == DiffConfig()


def test_invalid_values():
    with pytest.raises(ValueError):
        DiffConfig(max_depth=0)
    with pytest.raises(ValueError):
        DiffConfig(output_format='xml')
    with pytest.raises(ValueError):
        DiffConfig.from_env({'HTMLDIFF_MAX_DEPTH': 'deep'})
