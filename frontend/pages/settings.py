# frontend/pages/settings.py
from dataclasses import replace

import streamlit as st

from mfg_ui.profile import Profile, check_password_change
from mfg_ui.views import flush_notices, require_context

ctx = require_context()
ctx.deactivate()

if "profile" not in st.session_state:
    st.session_state["profile"] = Profile()
profile: Profile = st.session_state["profile"]

st.title("Settings")
st.caption("Manage your account settings and preferences")

tab_profile, tab_password, tab_notif = st.tabs(["Profile", "Password", "Notifications"])

with tab_profile:
    with st.form("form_profile"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Full Name", value=profile.name)
        email = c2.text_input("Email", value=profile.email)
        role = c1.text_input("Role", value=profile.role)
        phone = c2.text_input("Phone", value=profile.phone)
        saved = st.form_submit_button("Save Changes", type="primary")
    if saved:
        st.session_state["profile"] = replace(profile, name=name, email=email, role=role, phone=phone)
        ctx.notifier.success("Profile Updated", "Your profile information has been updated successfully.")

with tab_password:
    with st.form("form_password", clear_on_submit=True):
        st.text_input("Current Password", type="password", key="pw_current")
        new_pw = st.text_input("New Password", type="password", key="pw_new")
        confirm_pw = st.text_input("Confirm New Password", type="password", key="pw_confirm")
        changed = st.form_submit_button("Update Password", type="primary")
    if changed:
        problem = check_password_change(new_pw, confirm_pw)
        if problem:
            ctx.notifier.warn("Error", problem)
        else:
            ctx.notifier.success("Password Updated", "Your password has been updated successfully.")

with tab_notif:
    with st.form("form_notifications"):
        email_on = st.toggle("Email Notifications", value=profile.notifications.get("email", False))
        sms_on = st.toggle("SMS Notifications", value=profile.notifications.get("sms", False))
        app_on = st.toggle("In-App Notifications", value=profile.notifications.get("app", False))
        saved_n = st.form_submit_button("Save Preferences", type="primary")
    if saved_n:
        st.session_state["profile"] = replace(
            profile, notifications={"email": email_on, "sms": sms_on, "app": app_on}
        )
        ctx.notifier.success("Notification Preferences Updated", "Your notification preferences have been saved.")

flush_notices(ctx)
