"""
しりとり游戏服务模块
维护唯一的游戏状态（单词历史），按规则判定玩家输入的下一个单词
"""
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from config import config
from utils.kana_converter import to_hiragana
from utils.text_processor import normalize_ending, last_sound, first_sound
from services.word_bank import WordBank


logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """判定失败的种类: (错误码, 提示信息, 是否结束游戏)"""

    NOT_CONTINUATION = ("10001", "前の単語に続いていません", False)
    ALREADY_USED = ("10003", "同じ単語が既に使用されています", False)
    ENDS_IN_N = ("10004", "単語が「ん」で終わっています。ゲーム終了です。", True)
    REPEATED_IMMEDIATE = ("10005", "同じ単語が連続して入力されました。ゲーム終了です。", True)
    VERB_OR_ADJECTIVE = ("10006", "動詞または形容詞が入力されました。使用できません。", False)
    GAME_ENDED = ("10007", "ゲームは終了しています。リセットしてください。", False)

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]

    @property
    def terminal(self) -> bool:
        return self.value[2]


class GameState(Enum):
    ACTIVE = "active"
    ENDED = "ended"


@dataclass(frozen=True)
class ValidationOutcome:
    """判定结果"""

    accepted: bool
    word: Optional[str] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def accept(cls, word: str) -> 'ValidationOutcome':
        return cls(accepted=True, word=word)

    @classmethod
    def reject(cls, error: ErrorKind) -> 'ValidationOutcome':
        return cls(accepted=False, error=error)


class WordHistory:
    """
    已接受单词的有序历史
    至少包含一个单词（初始单词），只会追加或整体替换
    """

    def __init__(self, seed_word: str):
        self._words: List[str] = [seed_word]

    def current(self) -> str:
        return self._words[-1]

    def append(self, word: str) -> None:
        self._words.append(word)

    def replace(self, seed_word: str) -> None:
        """用新的初始单词整体替换历史"""
        self._words = [seed_word]

    def words(self) -> Tuple[str, ...]:
        return tuple(self._words)

    def contains_canonical(self, hiragana: str) -> bool:
        """按平假名形式检查单词是否已使用"""
        return any(to_hiragana(w) == hiragana for w in self._words)

    def __len__(self) -> int:
        return len(self._words)


def _never(word: str) -> bool:
    return False


class ShiritoriGame:
    """しりとり游戏（进程内唯一）"""

    def __init__(
        self,
        word_bank: Optional[WordBank] = None,
        classifier: Optional[Callable[[str], bool]] = None,
        end_on_terminal: bool = True,
        history: Optional[Sequence[str]] = None
    ):
        """
        Args:
            word_bank: 初始单词库
            classifier: 动词/形容词判定函数，为None时不做词性检查
            end_on_terminal: 「ん」结尾或连续重复时是否结束游戏
            history: 已接受的单词（按顺序），为None时从单词库随机选择初始单词
        """
        self.word_bank = word_bank or WordBank()
        self.classifier = classifier or _never
        self.end_on_terminal = end_on_terminal
        self._lock = threading.Lock()
        if history:
            self._history = WordHistory(history[0])
            for word in history[1:]:
                self._history.append(word)
        else:
            self._history = WordHistory(self.word_bank.pick_random())
        self._state = GameState.ACTIVE
        logger.info(f"✓ 游戏初始化完成，初始单词: {self._history.current()}")

    @property
    def state(self) -> GameState:
        return self._state

    def current(self) -> str:
        with self._lock:
            return self._history.current()

    def history(self) -> Tuple[str, ...]:
        with self._lock:
            return self._history.words()

    def snapshot(self) -> Tuple[Tuple[str, ...], GameState]:
        """同一时刻的单词历史和游戏状态"""
        with self._lock:
            return self._history.words(), self._state

    def reset(self) -> str:
        """重置游戏，返回新的初始单词"""
        with self._lock:
            seed = self.word_bank.pick_random()
            self._history.replace(seed)
            self._state = GameState.ACTIVE
        logger.info(f"游戏已重置，初始单词: {seed}")
        return seed

    def submit(self, word: str) -> ValidationOutcome:
        """
        判定玩家输入的下一个单词，成功时追加到历史

        Args:
            word: 玩家输入的原始单词（平假名或片假名）

        Returns:
            判定结果
        """
        with self._lock:
            outcome = self._validate(word)
            if outcome.accepted:
                self._history.append(word)
                logger.info(f"✓ 接受单词: {word} (历史{len(self._history)}个)")
            else:
                if outcome.error.terminal and self.end_on_terminal:
                    self._state = GameState.ENDED
                logger.info(f"拒绝单词: {word} ({outcome.error.code} {outcome.error.name})")
            return outcome

    def _validate(self, word: str) -> ValidationOutcome:
        if self._state is GameState.ENDED:
            return ValidationOutcome.reject(ErrorKind.GAME_ENDED)

        word_hiragana = to_hiragana(word)
        previous_hiragana = to_hiragana(self._history.current())

        if last_sound(word_hiragana) == "ん":
            return ValidationOutcome.reject(ErrorKind.ENDS_IN_N)

        # 词性判定使用原始输入
        if self.classifier(word):
            return ValidationOutcome.reject(ErrorKind.VERB_OR_ADJECTIVE)

        adjusted_previous = normalize_ending(previous_hiragana)

        if word_hiragana == previous_hiragana:
            return ValidationOutcome.reject(ErrorKind.REPEATED_IMMEDIATE)

        if self._history.contains_canonical(word_hiragana):
            return ValidationOutcome.reject(ErrorKind.ALREADY_USED)

        if last_sound(adjusted_previous) != first_sound(word_hiragana):
            return ValidationOutcome.reject(ErrorKind.NOT_CONTINUATION)

        return ValidationOutcome.accept(word)


def _create_default_game() -> ShiritoriGame:
    classifier = None
    if config.POS_CHECK_ENABLED:
        from services.tokenizer_service import tokenizer_service
        classifier = tokenizer_service.is_verb_or_adjective
    return ShiritoriGame(
        word_bank=WordBank(),
        classifier=classifier,
        end_on_terminal=config.END_GAME_ON_TERMINAL
    )


# 全局游戏实例
shiritori_game = _create_default_game()
