# ui/memorable_page.py
from __future__ import annotations
import streamlit as st

from core.errors import PasswordToolError
from core.logger import get_logger
from core.password_utils import generate_memorable
from core.strength_utils import analyze

log = get_logger(__name__)

MIN_WORDS, MAX_WORDS, DEFAULT_WORDS = 1, 12, 4

def render():
    st.subheader("🧠 Memorable Passphrase")
    st.caption("Random words joined by hyphens, followed by a two-digit number and a symbol.")

    word_count = st.slider("Number of words", MIN_WORDS, MAX_WORDS, DEFAULT_WORDS, 1)

    if st.button("🎲 Generate", type="primary", use_container_width=True):
        try:
            phrase = generate_memorable(int(word_count))
        except PasswordToolError as e:
            log.warning("memorable generation rejected: %s", e)
            st.error(f"Generation error: {e}")
            return

        st.code(phrase, language=None)
        report = analyze(phrase)
        st.caption(f"Strength: **{report.level.value}** ({report.score}/100)")
