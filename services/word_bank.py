"""
单词库服务模块
提供游戏开始/重置时使用的初始单词
"""
import logging
import random
from typing import Iterable, Optional, Tuple

from config import config


logger = logging.getLogger(__name__)


DEFAULT_WORDS: Tuple[str, ...] = (
    "しりとり", "りんご", "ごま", "まりも", "もも", "もうし", "しんじ", "じんじ",
    "じゃがいも", "もうふ", "いす", "すいか", "あめ", "あさり", "いわ", "おみやげ",
    "うま", "うちわ", "わかめ", "わに", "にんにく", "くつ", "きのこ", "すし",
    "ねぎ", "はさみ", "のこぎり", "まぐろ", "ものさし", "めだか",
)


class WordBank:
    """固定的初始单词库"""

    def __init__(
        self,
        words: Iterable[str] = DEFAULT_WORDS,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            words: 候选单词
            rng: 随机数生成器，测试时可传入固定种子的实例
        """
        self._words = tuple(words)
        if not self._words:
            raise ValueError("单词库不能为空")
        self._rng = rng if rng is not None else random.Random(config.RANDOM_SEED)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def pick_random(self) -> str:
        """随机选择一个单词"""
        word = self._rng.choice(self._words)
        logger.debug(f"选择初始单词: {word}")
        return word

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)
