"""Tiny navigation helper for the documentation site."""

import streamlit as st

ROUTE_STATE_KEY = "current_route"
ROUTE_QUERY_PARAM = "p"


def href_for(route: str) -> str:
    """Link target for ``route`` inside the Streamlit app (query-param routing)."""
    return f"?{ROUTE_QUERY_PARAM}={route}"


def current_route(default: str = "/") -> str:
    if ROUTE_STATE_KEY not in st.session_state:
        st.session_state[ROUTE_STATE_KEY] = st.query_params.get(ROUTE_QUERY_PARAM, default) or default
    return st.session_state[ROUTE_STATE_KEY]


def go(route: str) -> None:
    """Switch to ``route`` by updating session state and the URL, then rerun."""
    st.session_state[ROUTE_STATE_KEY] = route
    st.query_params[ROUTE_QUERY_PARAM] = route
    # without an explicit rerun the current render finishes with the previous
    # route and the sidebar looks stuck on fast clicks
    st.rerun()


__all__ = ["ROUTE_QUERY_PARAM", "ROUTE_STATE_KEY", "current_route", "go", "href_for"]
