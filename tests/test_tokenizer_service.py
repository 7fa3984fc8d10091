"""
Tests for the Sudachi-backed part-of-speech check.
"""
import pytest

from config import config
from services import game_service
from services.game_service import ErrorKind, ShiritoriGame
from services.tokenizer_service import TokenizerService, tokenizer_service
from services.word_bank import DEFAULT_WORDS


@pytest.fixture(scope="module")
def service():
    return TokenizerService(dict_type="core", mode="C")


@pytest.mark.parametrize("word", ["食べる", "走る", "美しい", "大きい"])
def test_kanji_verbs_and_adjectives(service, word):
    assert service.is_verb_or_adjective(word)


@pytest.mark.parametrize("word", ["たべる", "あかい", "べんきょうする", "りかいする"])
def test_kana_verbs_and_adjectives(service, word):
    assert service.is_verb_or_adjective(word)


@pytest.mark.parametrize("word", ["テレビ", "林檎", "学校", "いわ", "はさみ", "あさり"])
def test_nouns(service, word):
    assert not service.is_verb_or_adjective(word)


def test_seed_words_are_playable(service):
    """No seed word may be rejected as a verb or adjective."""
    flagged = [w for w in DEFAULT_WORDS if service.is_verb_or_adjective(w)]
    assert flagged == []


def test_empty(service):
    assert not service.is_verb_or_adjective("")


def test_dictionary_is_loaded_lazily():
    service = TokenizerService()
    assert service._tokenizer_obj is None


class TestGameWithSudachi:

    def test_verb_phrase_rejected(self, service):
        game = ShiritoriGame(classifier=service.is_verb_or_adjective, history=["あさり"])
        outcome = game.submit("りかいする")
        assert outcome.error is ErrorKind.VERB_OR_ADJECTIVE
        assert game.history() == ("あさり",)

    def test_kana_noun_accepted(self, service):
        game = ShiritoriGame(classifier=service.is_verb_or_adjective, history=["かい"])
        assert game.submit("いわ").accepted
        assert game.submit("わらう").error is ErrorKind.VERB_OR_ADJECTIVE
        assert game.history() == ("かい", "いわ")

    def test_default_game_uses_tokenizer(self, monkeypatch):
        monkeypatch.setattr(config, "POS_CHECK_ENABLED", True)
        game = game_service._create_default_game()
        assert game.classifier == tokenizer_service.is_verb_or_adjective

    def test_default_game_without_pos_check(self, monkeypatch):
        monkeypatch.setattr(config, "POS_CHECK_ENABLED", False)
        game = game_service._create_default_game()
        assert not game.classifier("たべる")
