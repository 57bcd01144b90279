# app.py
from pathlib import Path
import sys
import importlib
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.logger import get_logger

log = get_logger(__name__)

# ==== Streamlit ====
st.set_page_config(
    page_title="VLabs Password Tools",
    page_icon="🔐",
    layout="wide",
)

# ==== Pages ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "generator_page":  "🔐 Generator",
    "memorable_page":  "🧠 Memorable",
    "strength_page":   "📊 Strength",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except ImportError as e:
        log.error("failed to import ui.%s: %s", mod_name, e)
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

# Show errors but keep the remaining pages usable
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

choice = st.sidebar.radio(" ", list(PAGES.keys()))
PAGES[choice]()
