"""
分词服务模块
封装Sudachi分词器的使用，提供动词/形容词判定
"""
import logging
from typing import List, Optional
from sudachipy import tokenizer, dictionary

from config import config


logger = logging.getLogger(__name__)

# 禁止使用的词性（第一级）
_FORBIDDEN_POS = ("動詞", "形容詞")
_SYMBOL_POS = ("補助記号", "記号", "空白")
_DICTIONARY_FORM = "終止形"


class TokenizerService:
    """分词服务类"""

    def __init__(self, dict_type: str = "core", mode: str = 'C'):
        """
        初始化分词服务，词典在第一次使用时加载

        Args:
            dict_type: 词典类型，可选 "small", "core", "full"
            mode: 默认分词模式 'A' (短单元), 'B' (中等), 'C' (长单元)
        """
        self.dict_type = dict_type
        self.mode = mode
        self._tokenizer_obj = None

    @property
    def tokenizer_obj(self):
        if self._tokenizer_obj is None:
            try:
                self._tokenizer_obj = dictionary.Dictionary(dict_type=self.dict_type).create()
                logger.info(f"✓ Sudachi分词器初始化成功 (dict_type={self.dict_type})")
            except Exception as e:
                logger.error(f"✗ Sudachi分词器初始化失败: {e}")
                raise
        return self._tokenizer_obj

    def tokenize(
        self,
        text: str,
        mode: Optional[str] = None
    ) -> List:
        """
        对文本进行分词

        Args:
            text: 输入文本
            mode: 分词模式，为None时使用默认模式

        Returns:
            Token列表
        """
        mode_map = {
            'A': tokenizer.Tokenizer.SplitMode.A,
            'B': tokenizer.Tokenizer.SplitMode.B,
            'C': tokenizer.Tokenizer.SplitMode.C
        }

        split_mode = mode_map.get(mode or self.mode, tokenizer.Tokenizer.SplitMode.C)
        return self.tokenizer_obj.tokenize(text, split_mode)

    def is_verb_or_adjective(self, word: str) -> bool:
        """
        判断单词是否为动词或形容词
        以最后一个非符号token为准：动词或形容词且为终止形时判定为True，
        「いわ」之类被读成动词未然形/连用形的名词不受影响

        Args:
            word: 玩家输入的原始单词

        Returns:
            True如果是动词或形容词，否则False
        """
        if not word:
            return False

        for m in reversed(list(self.tokenize(word))):
            pos = m.part_of_speech()
            if pos[0] in _SYMBOL_POS:
                continue
            result = pos[0] in _FORBIDDEN_POS and pos[5].startswith(_DICTIONARY_FORM)
            logger.debug(f"词性判定: {word} -> {m.surface()}({pos[0]}, {pos[5]}) = {result}")
            return result
        return False


# 全局分词器实例
tokenizer_service = TokenizerService(
    dict_type=config.SUDACHI_DICT_TYPE,
    mode=config.SUDACHI_SPLIT_MODE
)
