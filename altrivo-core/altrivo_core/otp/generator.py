"""
OTP Code Generation
===================
"""

import secrets

CODE_MIN = 1000
CODE_MAX = 9998  # inclusive; 9999 is never drawn


def generate_otp() -> str:
    """
    Generate a 4-digit numeric code.

    Uniform over 1000..9998 using the ``secrets`` CSPRNG.
    """
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))
