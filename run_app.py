"""Launcher: loads .env then runs the Streamlit dashboard."""
import os
import sys

from config import BASE_DIR, load_env

os.chdir(BASE_DIR)
load_env(BASE_DIR)

sys.argv = ["streamlit", "run", str(BASE_DIR / "app.py")]
from streamlit.web import cli as stcli
sys.exit(stcli.main())
