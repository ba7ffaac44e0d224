"""One-time code acquisition for two-factor authentication."""
from typing import Callable, Union

import typer

from ...exceptions import InvalidTwoFactorCodeError

CodeProvider = Callable[[], Union[int, str]]

PROMPT_TEXT = 'Please enter the 2FA verification code'


def validate_code(raw: Union[int, str]) -> int:
    """
    Coerce a provider answer into a numeric code.

    Raises:
        InvalidTwoFactorCodeError: If the answer is not a number
    """
    if isinstance(raw, bool):
        raise InvalidTwoFactorCodeError('2FA code should be a number')
    if isinstance(raw, int):
        return raw

    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidTwoFactorCodeError('2FA code should be a number')
    return int(text)


def prompt_two_factor_code() -> int:
    """Ask the user for the code on the terminal."""
    answer = typer.prompt(PROMPT_TEXT, type=str)
    return validate_code(answer)
