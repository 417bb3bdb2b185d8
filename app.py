# app.py
import streamlit as st

from newsanalyzer.config import configure_logging
from newsanalyzer.ui import render_ui

st.set_page_config(page_title="Fake News Analyzer", page_icon="🛡️", layout="centered")
configure_logging()

def main():
    render_ui()

if __name__ == "__main__":
    main()
