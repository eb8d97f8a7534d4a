"""PassGen -- Streamlit web interface."""

import pyperclip
import streamlit as st

from passgen import MAX_LENGTH, MAX_SCORE, MIN_LENGTH
from passgen.widget import PasswordWidget

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_LOCK = _LUCIDE.format(s=32, paths=(
    '<rect width="18" height="11" x="3" y="11" rx="2" ry="2"/>'
    '<path d="M7 11V7a5 5 0 0 1 10 0v4"/>'
))

ICON_HISTORY = _LUCIDE.format(s=18, paths=(
    '<path d="M3 12a9 9 0 1 0 9-9 9.75 9.75 0 0 0-6.74 2.74L3 8"/>'
    '<path d="M3 3v5h5"/><path d="M12 7v5l4 2"/>'
))

BAND_COLORS = {
    "red": "#ef4444",
    "yellow": "#eab308",
    "blue": "#3b82f6",
    "green": "#22c55e",
}

CLASS_LABELS = {
    "uppercase": "Uppercase (A-Z)",
    "lowercase": "Lowercase (a-z)",
    "digits": "Numbers (0-9)",
    "symbols": "Symbols (!@#)",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f510",
    layout="centered",
)

st.markdown("""<style>
/* Keep the browser-side copy button on the password box visible */
[data-testid="stCode"] button,
[data-testid="stCodeBlock"] button,
.stCode button,
pre + div,
pre ~ button {
    opacity: 1 !important;
    visibility: visible !important;
}
</style>""", unsafe_allow_html=True)

if "widget" not in st.session_state:
    st.session_state.widget = PasswordWidget()
widget: PasswordWidget = st.session_state.widget


def _copy(action) -> None:
    """Run a widget copy action; on success redraw and toast, else warn."""
    try:
        action()
    except pyperclip.PyperclipException as exc:
        st.warning(f"Could not copy to clipboard: {exc}", icon="⚠️")
        return
    st.session_state.copied_toast = True
    st.rerun()


# Set by _copy just before its rerun
if st.session_state.pop("copied_toast", False):
    st.toast("✓ Copied!")

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_LOCK} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "The copy icon on the password box copies in your browser.  \n"
    "The **Copy** button writes to the clipboard of the machine running "
    "this app, so it only works when the app runs locally."
)

# ── Options (read first so the password below reflects them) ─────────────

length = st.slider("Length", MIN_LENGTH, MAX_LENGTH, widget.config.length)
col1, col2 = st.columns(2)
flags = {}
for i, (name, label) in enumerate(CLASS_LABELS.items()):
    with (col1 if i % 2 == 0 else col2):
        flags[name] = st.checkbox(label, value=getattr(widget.config, name))

changes = {"length": length, **flags}
if any(getattr(widget.config, k) != v for k, v in changes.items()):
    widget.update(**changes)

# ── Password display ──────────────────────────────────────────────────────

st.code(widget.password, language=None)

gen_col, copy_col, save_col = st.columns([3, 2, 1])
with gen_col:
    if st.button("\U0001f504 Generate New", key="generate", type="primary"):
        widget.regenerate()
        st.rerun()
with copy_col:
    if st.button("Copy", key="copy"):
        _copy(widget.copy)
with save_col:
    if st.button("\U0001f4be", key="save", help="Save to history"):
        widget.save()

# ── Strength ──────────────────────────────────────────────────────────────

strength = widget.strength
color = BAND_COLORS[strength["color"]]
st.markdown(
    f"**Strength:** <span style='color:{color}'>{strength['label']}</span>"
    f" &nbsp;·&nbsp; {strength['score']}/{MAX_SCORE}",
    unsafe_allow_html=True,
)
st.progress(strength["score"] / MAX_SCORE)

# ── History ───────────────────────────────────────────────────────────────

if widget.history:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_HISTORY} <strong>Recent Passwords</strong></p>',
        unsafe_allow_html=True,
    )
    for idx, pwd in enumerate(widget.history):
        if st.button(pwd, key=f"history-{idx}"):
            _copy(lambda: widget.select_history(idx))
