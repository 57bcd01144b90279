import streamlit as st

def render():
    st.markdown("## Password Tools 🔐")

    st.markdown(
        "Generate passwords and passphrases from the operating system's secure "
        "random source, and check how strong an existing password is."
    )

    st.markdown(
        """
        - **Generator**: choose length, character sets and look-alike filtering.
        - **Memorable**: hyphenated word passphrases.
        - **Strength**: heuristic 0–100 score with suggestions.
        """
    )

    st.info("Choose a page in the **sidebar** to get started.")
