# ui/generator_page.py
from __future__ import annotations
import json
from typing import List

import streamlit as st
import streamlit.components.v1 as components

from core.errors import PasswordToolError
from core.logger import get_logger
from core.password_utils import PRESETS, CharacterClassConfig, generate_many
from core.strength_utils import analyze

log = get_logger(__name__)

MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH = 4, 128, 16
MAX_COUNT, DEFAULT_COUNT = 50, 5
CUSTOM_PRESET = "Custom"

def _options_form() -> tuple[CharacterClassConfig, int, bool]:
    preset_name = st.selectbox("Preset", [CUSTOM_PRESET, *PRESETS.keys()])
    preset = PRESETS.get(preset_name, CharacterClassConfig(length=DEFAULT_LENGTH))

    colL, colR = st.columns([3, 2])
    with colL:
        length = st.slider("Password length", MIN_LENGTH, MAX_LENGTH, preset.length, 1)
        count  = st.number_input("Quantity", min_value=1, max_value=MAX_COUNT, value=DEFAULT_COUNT, step=1)
        custom = st.text_input("Extra characters (optional)", value=preset.custom_chars)
        show_plain = st.checkbox("Show characters (unmasked)", value=False)
    with colR:
        st.markdown("**Character sets**")
        use_upper   = st.checkbox("A–Z", value=preset.use_upper)
        use_lower   = st.checkbox("a–z", value=preset.use_lower)
        use_digits  = st.checkbox("0–9", value=preset.use_digits)
        use_symbols = st.checkbox("Symbols", value=preset.use_symbols)

        st.markdown("**Filters**")
        exclude_similar = st.checkbox("Exclude look-alike (i l 1 L o 0 O)", value=preset.exclude_similar)

    config = CharacterClassConfig(
        length=int(length),
        use_upper=use_upper,
        use_lower=use_lower,
        use_digits=use_digits,
        use_symbols=use_symbols,
        exclude_similar=exclude_similar,
        custom_chars=custom,
    )
    return config, int(count), show_plain

def _render_table(passwords: List[str], show_plain: bool) -> None:
    rows = []
    for p in passwords:
        report = analyze(p)
        rows.append({
            "plain": p,
            "masked": "•" * len(p),
            "strength": f"{report.level.value} ({report.score}/100)",
        })
    frame_height = min(720, 120 + 36 * len(rows))

    components.html(
        f"""
<style>
  :root {{ color-scheme: light dark; }}
  table#pw {{ border-collapse: collapse; width: 100%; font-family: system-ui, sans-serif; }}
  td, th {{ padding: 6px 10px; text-align: left; border-bottom: 1px solid #e5e7eb; }}
  td.pw {{ font-family: ui-monospace, Consolas, monospace; }}
  button {{ background:#2563eb; border:none; color:#fff; padding:5px 10px; border-radius:6px; cursor:pointer; }}
</style>
<button id="toggle"></button>
<table id="pw">
  <thead><tr><th>#</th><th>Password</th><th>Strength</th><th></th></tr></thead>
  <tbody id="rows"></tbody>
</table>
<script>
const data = {json.dumps(rows)};
let plain = {str(bool(show_plain)).lower()};
const body = document.getElementById("rows");
const toggle = document.getElementById("toggle");

function draw() {{
  body.innerHTML = "";
  data.forEach((it, i) => {{
    const tr = document.createElement("tr");
    const cells = [String(i + 1), plain ? it.plain : it.masked, it.strength];
    cells.forEach((text, k) => {{
      const td = document.createElement("td");
      if (k === 1) td.className = "pw";
      td.textContent = text;
      tr.appendChild(td);
    }});
    const td = document.createElement("td");
    const btn = document.createElement("button");
    btn.textContent = "Copy";
    btn.onclick = () => navigator.clipboard.writeText(it.plain).then(() => {{
      btn.textContent = "Copied";
      setTimeout(() => btn.textContent = "Copy", 900);
    }}).catch(() => alert("Clipboard blocked by browser"));
    td.appendChild(btn);
    tr.appendChild(td);
    body.appendChild(tr);
  }});
  toggle.textContent = plain ? "🙈 Hide" : "👁 Show";
}}
toggle.onclick = () => {{ plain = !plain; draw(); }};
draw();
</script>
        """,
        height=frame_height,
    )

def render():
    st.subheader("🔐 Password Generator")

    config, count, show_plain = _options_form()
    gen = st.button("🎲 Generate", type="primary", use_container_width=True)

    if gen:
        try:
            passwords = generate_many(config, count)
        except PasswordToolError as e:
            log.warning("generation rejected: %s", e)
            st.error(f"Generation error: {e}")
            return
        _render_table(passwords, show_plain)
