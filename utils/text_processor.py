"""
词尾处理工具模块
计算前一个单词的"有效词尾"，供接龙判定使用
"""
from .kana_converter import LONG_VOWEL_MARK


# 小写拗音在词尾时按大写处理
_SMALL_GLIDES = {'ゃ': 'や', 'ゅ': 'ゆ', 'ょ': 'よ'}

# 长音符前一个假名 -> 长音符所代表的音
_LONG_VOWEL_TABLE = {
    'あ': 'あ', 'い': 'い', 'う': 'う', 'え': 'え', 'お': 'お',
    'か': 'か', 'き': 'き', 'く': 'く', 'け': 'け', 'こ': 'こ',
    'さ': 'さ', 'し': 'し', 'す': 'す', 'せ': 'せ', 'そ': 'そ',
    'た': 'た', 'ち': 'ち', 'つ': 'つ', 'て': 'て', 'と': 'と',
    'な': 'な', 'に': 'に', 'ぬ': 'ぬ', 'ね': 'ね', 'の': 'の',
    'は': 'は', 'ひ': 'ひ', 'ふ': 'ふ', 'へ': 'へ', 'ほ': 'ほ',
    'ま': 'ま', 'み': 'み', 'む': 'む', 'め': 'め', 'も': 'も',
    'や': 'や', 'ゆ': 'ゆ', 'よ': 'よ',
    'ゃ': 'や', 'ゅ': 'ゆ', 'ょ': 'よ',
    'ら': 'ら', 'り': 'り', 'る': 'る', 'れ': 'れ', 'ろ': 'ろ',
    'わ': 'わ', 'ゐ': 'ゐ', 'ゑ': 'ゑ', 'を': 'を',
    'が': 'が', 'ぎ': 'ぎ', 'ぐ': 'ぐ', 'げ': 'げ', 'ご': 'ご',
    'ざ': 'ざ', 'じ': 'じ', 'ず': 'ず', 'ぜ': 'ぜ', 'ぞ': 'ぞ',
    'だ': 'だ', 'ぢ': 'ぢ', 'づ': 'づ', 'で': 'で', 'ど': 'ど',
    'ば': 'ば', 'び': 'び', 'ぶ': 'ぶ', 'べ': 'べ', 'ぼ': 'ぼ',
    'ぱ': 'ぱ', 'ぴ': 'ぴ', 'ぷ': 'ぷ', 'ぺ': 'ぺ', 'ぽ': 'ぽ',
    'ぁ': 'あ', 'ぃ': 'い', 'ぅ': 'う', 'ぇ': 'え', 'ぉ': 'お',
}


def normalize_ending(word: str) -> str:
    """
    处理词尾的特殊情况

    - 以「ゃ」「ゅ」「ょ」结尾时替换为「や」「ゆ」「よ」
    - 以「ー」结尾时，按长音符前一个假名查表替换长音符；
      查不到（或单词太短）时直接去掉长音符

    Args:
        word: 平假名单词

    Returns:
        处理后的单词，其最后一个字符即接龙需要的音
    """
    if not word:
        return word

    last = word[-1]
    if last in _SMALL_GLIDES:
        return word[:-1] + _SMALL_GLIDES[last]

    if last == LONG_VOWEL_MARK:
        before = word[-2:-1]
        sound = _LONG_VOWEL_TABLE.get(before)
        if sound:
            return word[:-1] + sound
        return word[:-1]

    return word


def last_sound(word: str) -> str:
    """返回最后一个字符，空串返回空串"""
    return word[-1:]


def first_sound(word: str) -> str:
    """返回第一个字符，空串返回空串"""
    return word[:1]
