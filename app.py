"""passmint -- Streamlit web interface."""

import html

import streamlit as st

from passmint import (
    CATEGORIES,
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationRequest,
    REVEAL_STAGGER_MS,
    NoPassword,
    score,
)
from passmint.clipboard import CopyFeedback, copy_password

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

# ── Custom CSS ────────────────────────────────────────────────────────────

st.markdown("""<style>
@keyframes reveal {
    from { opacity: 0; transform: translateY(-6px); }
    to   { opacity: 1; transform: none; }
}
.password-reveal {
    display: inline-block;
    opacity: 0;
    animation: reveal 0.25s ease-out forwards;
}
.password-display {
    font-family: monospace;
    font-size: 1.6rem;
    letter-spacing: 0.05em;
    word-break: break-all;
    min-height: 2.2rem;
}
.strength-track {
    background: #e5e7eb;
    border-radius: 9999px;
    height: 10px;
}
.strength-bar {
    border-radius: 9999px;
    height: 10px;
    transition: width 0.5s, background-color 0.5s;
}
</style>""", unsafe_allow_html=True)

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption("Everything runs locally. Nothing is stored or sent anywhere.")

# ── Settings ──────────────────────────────────────────────────────────────

length = st.slider("Length", MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH)

cols = st.columns(len(CATEGORIES))
selected = [
    name
    for col, name in zip(cols, CATEGORIES)
    if col.checkbox(name.capitalize(), value=True, key=f"opt_{name}")
]
exclude_ambiguous = st.checkbox("Exclude ambiguous characters (lI1O0o)")

request = GenerationRequest.from_settings(selected, exclude_ambiguous, length)

col_gen, col_copy = st.columns(2)
regenerate = col_gen.button("Generate password", type="primary")

# Settings changes regenerate; the copy button must not.
if regenerate or st.session_state.get("request") != request:
    st.session_state["request"] = request
    st.session_state["password"] = request.assemble()

pwd = st.session_state["password"]

# ── Output ────────────────────────────────────────────────────────────────

if isinstance(pwd, NoPassword):
    display = f"<span>{html.escape(str(pwd))}</span>"
else:
    display = "".join(
        f'<span class="password-reveal" style="animation-delay:{i * REVEAL_STAGGER_MS}ms">'
        f"{html.escape(ch)}</span>"
        for i, ch in enumerate(pwd)
    )
st.markdown(f'<div class="password-display">{display}</div>', unsafe_allow_html=True)

level = score(pwd)
st.markdown(
    f'<div class="strength-track"><div class="strength-bar" '
    f'style="width:{level.fill_percent}%;background:{level.color}"></div></div>'
    f"<p style='color:{level.color}'><strong>{level.label}</strong></p>",
    unsafe_allow_html=True,
)


# ── Copy ──────────────────────────────────────────────────────────────────


# Reruns on a timer so the "Copied" label reverts without user input.
@st.fragment(run_every=1)
def copy_button():
    feedback = st.session_state.setdefault("copy_feedback", CopyFeedback())
    if st.button("Copied" if feedback.copied else "Copy", key="copy"):
        current = st.session_state["password"]
        if copy_password(current, feedback):
            st.rerun(scope="fragment")
        elif not isinstance(current, NoPassword):
            st.toast("Could not copy to clipboard", icon="⚠️")


with col_copy:
    copy_button()
