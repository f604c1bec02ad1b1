# protocols/__init__.py
import re
from typing import Any

import requests

from .base import NameProtocol
from .home_page import HomePageProtocol
from .login_session import LOGIN_SESSION_PATH, LoginSessionProtocol  # Import all concrete implementations

MODERN_GENERATION = re.compile(r"iLO (3|4|5)")

def is_modern_generation(hardware_revision: str) -> bool:
    """True for iLO 3, 4 and 5, which expose the JSON login-session endpoint."""
    return MODERN_GENERATION.search(hardware_revision) is not None

def get_name_protocol(hardware_revision: str, http: Any = requests, timeout: float = 5.0,
                      login_session_path: str = LOGIN_SESSION_PATH) -> NameProtocol:
    """Protocol factory: returns the name protocol the device generation understands."""
    if is_modern_generation(hardware_revision):
        return LoginSessionProtocol(http, timeout, path=login_session_path)
    return HomePageProtocol(http, timeout)

__all__ = [
    "NameProtocol",
    "HomePageProtocol",
    "LoginSessionProtocol",
    "is_modern_generation",
    "get_name_protocol",
]
