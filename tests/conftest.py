"""
测试公共fixture
"""
import random

import pytest

from config import Config
from services.game_service import ShiritoriGame
from services.word_bank import WordBank


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def word_bank(rng):
    return WordBank(rng=rng)


def make_game(*words, classifier=None, end_on_terminal=True):
    """以指定历史创建游戏（第一个单词作为初始单词）"""
    return ShiritoriGame(
        word_bank=WordBank([words[0]]),
        classifier=classifier,
        end_on_terminal=end_on_terminal,
        history=words
    )


@pytest.fixture
def test_config():
    return Config(LOG_FILE='', POS_CHECK_ENABLED=False)


@pytest.fixture
def game():
    return make_game("しりとり")


@pytest.fixture
def client(test_config, game):
    from app import create_app
    app = create_app(test_config, game=game)
    app.testing = True
    return app.test_client()


@pytest.fixture(name="make_game")
def make_game_fixture():
    return make_game
