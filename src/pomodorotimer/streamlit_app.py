"""Streamlit dashboard for the Pomodoro timer.

Run with:

    streamlit run src/pomodorotimer/streamlit_app.py

The dashboard plans a session with the same scheduler as the CLI and feeds the
countdown engine into a set of Streamlit placeholders. Use the "Fast demo"
option to treat 1 real second as 1 Pomodoro minute.
"""
from __future__ import annotations

import streamlit as st

from pomodorotimer import scheduler
from pomodorotimer.config import DEFAULTS, Configuration, ConfigurationError
from pomodorotimer.display import format_time
from pomodorotimer.engine import CountdownEngine
from pomodorotimer.scheduler import Interval


class StreamlitDisplay:
    """Pushes countdown progress into Streamlit placeholders."""

    def __init__(self, session: scheduler.Session) -> None:
        self._session = session
        self._header = st.empty()
        self._timer = st.empty()
        self._progress = st.progress(0)

    def on_interval_start(self, interval: Interval) -> None:
        self._header.subheader(f"{interval.label} ({interval.index}/{len(self._session)})")
        self._progress.progress(0)

    def on_tick(self, interval: Interval, remaining: int) -> None:
        elapsed = interval.duration_seconds - remaining
        self._timer.markdown(f"<div class='big-timer'>▶ {format_time(remaining)}</div>", unsafe_allow_html=True)
        self._progress.progress(int(100 * elapsed / interval.duration_seconds))

    def on_interval_complete(self, interval: Interval) -> None:
        self._timer.markdown(f"<div class='big-timer'>✓ {interval.label} complete</div>", unsafe_allow_html=True)
        self._progress.progress(100)

    def on_session_complete(self) -> None:
        st.success("Session complete! 🎉")


def main() -> None:
    st.set_page_config(page_title="Pomodoro Dashboard", layout="centered")
    st.title("Pomodoro Dashboard")
    st.markdown(
        "<style>.big-timer {font-size:56px; font-weight:700; text-align:center; margin: 12px 0}</style>",
        unsafe_allow_html=True,
    )

    with st.sidebar:
        pomodoros = st.number_input("Pomodoros", min_value=1, value=DEFAULTS["pomodoros"])
        focus_minutes = st.number_input("Focus minutes", min_value=1, value=DEFAULTS["focus_minutes"])
        short_break_minutes = st.number_input("Short break minutes", min_value=1, value=DEFAULTS["short_break_minutes"])
        long_break_minutes = st.number_input("Long break minutes", min_value=1, value=DEFAULTS["long_break_minutes"])
        long_break_every = st.number_input("Long break every N pomodoros", min_value=1, value=DEFAULTS["long_break_every"])
        fast = st.checkbox("Fast demo (1s per minute)", value=True)

    try:
        config = Configuration.from_minutes(
            pomodoros=int(pomodoros),
            focus_minutes=int(focus_minutes),
            short_break_minutes=int(short_break_minutes),
            long_break_minutes=int(long_break_minutes),
            long_break_every=int(long_break_every),
            fast=fast,
        )
    except ConfigurationError as exc:
        st.error(str(exc))
        return

    session = scheduler.plan(config)

    st.subheader("Planned intervals")
    for item in session:
        st.write(f"- {item.label}: {format_time(item.duration_seconds)}")
    st.caption(f"Total: {format_time(session.total_seconds)}")
    st.write("---")

    if st.button("Start session"):
        CountdownEngine().run(session, StreamlitDisplay(session))


if __name__ == "__main__":
    main()
