from mfg_ui.profile import Profile, check_password_change


def test_password_rules():
    assert check_password_change("secret123", "secret123") is None
    assert "do not match" in check_password_change("secret123", "secret124")
    assert "at least 8" in check_password_change("short", "short")


def test_mismatch_is_reported_first():
    assert "do not match" in check_password_change("a", "b")


def test_profile_defaults():
    p = Profile()
    assert p.notifications == {"email": True, "sms": False, "app": True}
    assert Profile().notifications is not p.notifications
