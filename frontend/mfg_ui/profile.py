# frontend/mfg_ui/profile.py
from dataclasses import dataclass, field
from typing import Dict, Optional

MIN_PASSWORD_LENGTH = 8


@dataclass
class Profile:
    name: str = "John Smith"
    email: str = "john.smith@example.com"
    role: str = "Factory Manager"
    phone: str = "555-123-4567"
    notifications: Dict[str, bool] = field(default_factory=lambda: {"email": True, "sms": False, "app": True})


def check_password_change(new_password: str, confirm_password: str) -> Optional[str]:
    """None when acceptable, otherwise the message to show."""
    if new_password != confirm_password:
        return "New password and confirm password do not match."
    if len(new_password or "") < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
    return None
