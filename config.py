"""
应用配置模块
统一管理所有配置项和环境变量
"""
import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else None


@dataclass
class Config:
    """应用配置类"""

    # 服务器配置
    HOST: str = os.getenv('SHIRITORI_HOST', '127.0.0.1')
    PORT: int = int(os.getenv('SHIRITORI_PORT', '8000'))
    DEBUG: bool = _env_bool('SHIRITORI_DEBUG', 'False')

    # 日志配置
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_FILE: str = os.getenv('LOG_FILE', 'app.log')  # 为空则不写文件

    # CORS配置
    CORS_ORIGINS: str = os.getenv('CORS_ORIGINS', '*')

    # 业务配置
    MAX_WORD_LENGTH: int = int(os.getenv('MAX_WORD_LENGTH', '50'))
    END_GAME_ON_TERMINAL: bool = _env_bool('END_GAME_ON_TERMINAL', 'True')
    RANDOM_SEED: Optional[int] = _env_int('RANDOM_SEED')

    # 词性判定（Sudachi）
    POS_CHECK_ENABLED: bool = _env_bool('POS_CHECK_ENABLED', 'True')
    SUDACHI_DICT_TYPE: str = os.getenv('SUDACHI_DICT_TYPE', 'core')  # small, core, full
    SUDACHI_SPLIT_MODE: str = os.getenv('SUDACHI_SPLIT_MODE', 'C')  # A, B, or C

    @classmethod
    def from_env(cls) -> 'Config':
        """从环境变量创建配置实例"""
        return cls()

    def validate(self) -> None:
        """验证配置的有效性"""
        if self.PORT < 1 or self.PORT > 65535:
            raise ValueError(f"无效的端口号: {self.PORT}")

        if self.MAX_WORD_LENGTH <= 0:
            raise ValueError(f"最大单词长度必须大于0: {self.MAX_WORD_LENGTH}")

        if self.SUDACHI_SPLIT_MODE not in ['A', 'B', 'C']:
            raise ValueError(f"无效的分词模式: {self.SUDACHI_SPLIT_MODE}")

        if self.SUDACHI_DICT_TYPE not in ['small', 'core', 'full']:
            raise ValueError(f"无效的词典类型: {self.SUDACHI_DICT_TYPE}")

        if self.LOG_LEVEL not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError(f"无效的日志级别: {self.LOG_LEVEL}")


# 全局配置实例
config = Config.from_env()
