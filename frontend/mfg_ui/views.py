# frontend/mfg_ui/views.py
"""Streamlit rendering of the dashboard; all state lives in DashboardContext / EntityScreen."""
import datetime as dt
import logging

import pandas as pd
import streamlit as st

from .config import ConfigError, load_config
from .context import DashboardContext
from .entity import DATE, SELECT, TEXTAREA, EntityScreen, EntitySpec, Field

logger = logging.getLogger(__name__)

CTX_KEY = "mfg_ctx"


# ---------- session context ----------
def get_context() -> DashboardContext:
    """Raises ConfigError when STORE_URL / STORE_KEY are missing."""
    ctx = st.session_state.get(CTX_KEY)
    if ctx is None:
        ctx = DashboardContext(load_config())
        st.session_state[CTX_KEY] = ctx
    return ctx


def render_setup_guide(err: ConfigError) -> None:
    st.title("Store Connection Error")
    st.caption("The dashboard is missing the required store configuration.")
    st.error("Missing environment variables: " + ", ".join(err.missing))
    st.markdown(
        """
**Follow these steps to connect the dashboard to the store:**

1. Start the store service (`uvicorn mfg_api.main:app --port 8011` inside `backend/`).
2. Put `STORE_URL` (e.g. `http://127.0.0.1:8011`) and `STORE_KEY` into `frontend/.env`
   or export them in the shell that runs Streamlit.
3. Refresh the page.
"""
    )
    if st.button("Refresh Page", key="btn_setup_refresh"):
        st.rerun()


def require_context() -> DashboardContext:
    try:
        return get_context()
    except ConfigError as e:
        render_setup_guide(e)
        st.stop()


def flush_notices(ctx: DashboardContext) -> None:
    for n in ctx.notifier.drain():
        text = f"**{n.title}**" + (f": {n.description}" if n.description else "")
        st.toast(text, icon=n.icon)


def live_updates(ctx: DashboardContext) -> None:
    """Poll the change feed in the background; rerun the page when the shown table changed."""

    @st.fragment(run_every=ctx.config.poll_seconds)
    def _poll():
        if ctx.feed.poll():
            st.rerun()

    _poll()


# ---------- form widgets ----------
def _nonce_key(table: str) -> str:
    return f"{table}__form_nonce"


def _bump_nonce(table: str) -> None:
    st.session_state[_nonce_key(table)] = st.session_state.get(_nonce_key(table), 0) + 1


def _parse_date(value):
    try:
        return dt.date.fromisoformat(str(value)) if value else None
    except ValueError:
        return None


def _field_input(screen: EntityScreen, f: Field, value, key: str):
    if f.kind == SELECT:
        opts = [o for o in screen.field_options(f)]
        current = "" if value is None else str(value)
        if current not in opts:
            opts = [current] + opts
        return st.selectbox(f.label, opts, index=opts.index(current), key=key)
    if f.kind == DATE:
        picked = st.date_input(f.label, value=_parse_date(value), key=key)
        return picked.isoformat() if picked else ""
    if f.kind == TEXTAREA:
        return st.text_area(f.label, value=str(value or ""), key=key)
    return st.text_input(f.label, value="" if value is None else str(value), key=key)


def _render_form(screen: EntityScreen, mode: str) -> None:
    spec = screen.spec
    nonce = st.session_state.get(_nonce_key(spec.table), 0)
    heading = f"Add New {spec.name}" if mode == "add" else f"Edit {spec.name}"
    with st.container(border=True):
        st.subheader(heading)
        with st.form(f"{spec.table}-{mode}-{nonce}"):
            draft = {}
            for f in spec.fields:
                label_key = f"{spec.table}-{mode}-{nonce}-{f.name}"
                draft[f.name] = _field_input(screen, f, screen.draft.get(f.name, f.default), label_key)
            c1, c2 = st.columns(2)
            save = c1.form_submit_button(f"Save {spec.name}" if mode == "add" else f"Update {spec.name}", type="primary")
            cancel = c2.form_submit_button("Cancel")

    if cancel:
        if mode == "add":
            screen.add_open = False
        else:
            screen.edit_open = False
        st.rerun()
    if save:
        missing = spec.missing_required(draft)
        if missing:
            screen.draft = draft
            st.warning("Please fill in: " + ", ".join(missing))
            return
        screen.draft = draft
        ok = screen.submit_add() if mode == "add" else screen.submit_edit()
        if ok is not None:
            st.rerun()


def _render_delete(screen: EntityScreen) -> None:
    spec = screen.spec
    target = spec.describe(screen.delete_target or {})
    with st.container(border=True):
        st.subheader("Confirm Deletion")
        st.write(f'Are you sure you want to delete "{target}"? This action cannot be undone.')
        c1, c2 = st.columns(2)
        if c1.button(f"Delete {spec.name}", type="primary", key=f"{spec.table}-confirm-delete"):
            if screen.confirm_delete():
                st.rerun()
        if c2.button("Cancel", key=f"{spec.table}-cancel-delete"):
            screen.delete_open = False
            st.rerun()


# ---------- generic list / search / action view ----------
def render_entity_table(screen: EntityScreen, row_actions=None) -> None:
    spec = screen.spec

    head, search_col, add_col = st.columns([3, 2, 1])
    with head:
        st.header(spec.title)
        if spec.subtitle:
            st.caption(spec.subtitle)
    query = search_col.text_input("Search", value="", placeholder="Search...", key=f"{spec.table}-search")
    if add_col.button(f"Add {spec.name}", type="primary", key=f"{spec.table}-add"):
        screen.open_add()
        _bump_nonce(spec.table)

    if not screen.loaded:
        st.info("Loading...")
        return

    rows = screen.search(query)
    if not rows:
        st.info("No results found.")
        return

    df = pd.DataFrame(rows)
    keys = [c.key for c in spec.columns]
    for k in keys:
        if k not in df.columns:
            df[k] = None
    view = df[keys].rename(columns={c.key: c.label for c in spec.columns})

    event = st.dataframe(
        view,
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"{spec.table}-grid",
    )
    picked = list(getattr(getattr(event, "selection", None), "rows", []) or [])
    if not picked:
        st.caption("Select a row to edit or delete it.")
        return
    row = rows[picked[0]]

    if row_actions is not None:
        row_actions(screen, row)
        return

    c1, c2, _ = st.columns([1, 1, 6])
    if c1.button("✏️ Edit", key=f"{spec.table}-edit"):
        screen.open_edit(row)
        _bump_nonce(spec.table)
    if c2.button("🗑️ Delete", key=f"{spec.table}-delete"):
        screen.open_delete(row)


def render_entity_page(spec: EntitySpec, row_actions=None, below_table=None) -> EntityScreen:
    ctx = require_context()
    screen = ctx.activate(spec)

    render_entity_table(screen, row_actions=row_actions)
    if below_table is not None:
        below_table(screen)

    if screen.add_open:
        _render_form(screen, "add")
    if screen.edit_open:
        _render_form(screen, "edit")
    if screen.delete_open:
        _render_delete(screen)

    flush_notices(ctx)
    live_updates(ctx)
    return screen
