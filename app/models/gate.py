"""
Gate models for secure access gateway.
"""
from enum import Enum


class GateAction(str, Enum):
    """存取閘道決策"""
    CONTINUE = "continue"
    REDIRECT_TO_LOGIN = "redirect_to_login"
