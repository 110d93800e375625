"""核心模块 - Token系统、RPN评估器、解码器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, VALID_SKELETONS,
    RPNValidator, enumerate_skeletons, tokenize
)
from .rpn_evaluator import RPNEvaluator
from .rpn_decoder import RPNDecoder
from .rpn_encoder import RPNEncoder
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'VALID_SKELETONS',
    'RPNValidator', 'enumerate_skeletons', 'tokenize',
    'RPNEvaluator', 'RPNDecoder', 'RPNEncoder', 'Operators'
]
