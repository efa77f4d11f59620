"""配置模块"""
from .config import (
    TOKENIZER_CONFIG, PARSER_CONFIG, ROOT_FINDER_CONFIG, SAMPLING_CONFIG,
    CONFLICT_POLICIES, ROOT_METHODS, validate_config
)

__all__ = [
    'TOKENIZER_CONFIG', 'PARSER_CONFIG', 'ROOT_FINDER_CONFIG', 'SAMPLING_CONFIG',
    'CONFLICT_POLICIES', 'ROOT_METHODS', 'validate_config'
]
