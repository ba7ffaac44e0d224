"""Two-factor authentication challenge handling."""
from .code_provider import CodeProvider, prompt_two_factor_code, validate_code
from .handler import EXCHANGE_PATH, TwoFactorHandler

__all__ = [
    'CodeProvider',
    'EXCHANGE_PATH',
    'TwoFactorHandler',
    'prompt_two_factor_code',
    'validate_code',
]
