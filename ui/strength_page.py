# ui/strength_page.py
from __future__ import annotations
import pandas as pd
import streamlit as st

from core.strength_utils import StrengthLevel, analyze

# Colour per level for the progress caption
LEVEL_ICONS = {
    StrengthLevel.VERY_WEAK: "🟥",
    StrengthLevel.WEAK: "🟧",
    StrengthLevel.FAIR: "🟨",
    StrengthLevel.GOOD: "🟩",
    StrengthLevel.STRONG: "🟦",
    StrengthLevel.VERY_STRONG: "🟪",
}

def analyze_batch(text: str) -> pd.DataFrame:
    """One row per non-empty line: password length, score, level and feedback."""
    rows = []
    for line in text.splitlines():
        if not line:
            continue
        report = analyze(line)
        rows.append({
            "Length": len(line),
            "Score": report.score,
            "Level": report.level.value,
            "Feedback": " ".join(report.feedback),
        })
    return pd.DataFrame(rows, columns=["Length", "Score", "Level", "Feedback"])

def render():
    st.subheader("📊 Password Strength")

    password = st.text_input("Password", type="password")
    if password:
        report = analyze(password)
        st.progress(report.score / 100)
        st.markdown(f"{LEVEL_ICONS[report.level]} **{report.level.value}** ({report.score}/100)")
        for msg in report.feedback:
            st.write(f"- {msg}")

    st.subheader("📋 Batch")
    text = st.text_area("One password per line")
    if st.button("Analyze all"):
        df = analyze_batch(text)
        if df.empty:
            st.info("Nothing to analyze.")
        else:
            st.dataframe(df, use_container_width=True)
