"""
假名转换工具模块
处理片假名和平假名之间的转换，所有比较都在平假名上进行
"""

LONG_VOWEL_MARK = 'ー'


def katakana_to_hiragana(katakana_string: str) -> str:
    """
    将片假名转换为平假名

    Args:
        katakana_string: 片假名字符串

    Returns:
        转换后的平假名字符串，其他字符（包括长音符）原样保留
    """
    hiragana_string = ""
    for char in katakana_string:
        if 'ァ' <= char <= 'ヶ':
            hiragana_char = chr(ord(char) - 96)
            hiragana_string += hiragana_char
        else:
            hiragana_string += char
    return hiragana_string


def to_hiragana(text: str) -> str:
    """将单词统一为比较用的平假名形式"""
    return katakana_to_hiragana(text)

