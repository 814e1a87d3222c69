"""Quadratic Voting Analytics Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import analytics, results  # noqa: E402
from web.api.errors import NotFoundError, ValidationError  # noqa: E402

setup_logging(to_file=False)

# Ensure container is initialized
container.init(read_only=True)

st.set_page_config(page_title="Quadratic Voting Analytics", page_icon="🗳️", layout="wide")

OPTION_COLOR = "#6366F1"
VOTER_COLOR = "#F97316"
EDGE_COLOR = "#9CA3AF"


@st.cache_data(ttl=60, show_spinner=False)
def get_events():
    """Get events from DB."""
    return [e.model_dump() for e in analytics.get_events().items]


@st.cache_data(ttl=60, show_spinner=False)
def get_event_data(event_id: str):
    """Get analytics and results for an event via views."""
    logger.info("Loading analytics for event {}", event_id)
    data = analytics.get_analytics(event_id).model_dump()
    try:
        data["results"] = results.get_results(event_id).model_dump()
    except ValidationError as e:
        logger.warning("No results for event {}: {}", event_id, e.message)
        data["results"] = None
    return data


def scores_chart(options: list) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[o["title"] for o in options],
            y=[o["quadratic_score"] for o in options],
            marker_color=OPTION_COLOR,
            text=[f"{o['quadratic_score']:.2f}" for o in options],
            textposition="outside",
            customdata=[[o["total_credits"], o["vote_count"]] for o in options],
            hovertemplate="%{x}<br>score %{y:.2f}<br>%{customdata[0]} credits, %{customdata[1]} voters<extra></extra>",
        )
    ).update_layout(
        xaxis_title="",
        yaxis_title="Quadratic score",
        margin=dict(t=40, b=40, l=40, r=20),
        height=350,
    )


def network_chart(graph: dict) -> go.Figure:
    positions = {n["id"]: (n["x"], n["y"]) for n in graph["nodes"]}
    max_weight = max((e["weight"] for e in graph["edges"]), default=1)

    fig = go.Figure()
    for e in graph["edges"]:
        (x0, y0), (x1, y1) = positions[e["source"]], positions[e["target"]]
        fig.add_trace(
            go.Scatter(
                x=[x0, x1],
                y=[y0, y1],
                mode="lines",
                line=dict(color=EDGE_COLOR, width=0.5 + 4 * e["weight"] / max_weight),
                hoverinfo="skip",
                showlegend=False,
            )
        )

    for node_type, node_color, size in (("voter", VOTER_COLOR, 10), ("option", OPTION_COLOR, 22)):
        nodes = [n for n in graph["nodes"] if n["type"] == node_type]
        fig.add_trace(
            go.Scatter(
                x=[n["x"] for n in nodes],
                y=[n["y"] for n in nodes],
                mode="markers+text" if node_type == "option" else "markers",
                text=[n["label"] for n in nodes],
                textposition="top center",
                marker=dict(color=node_color, size=size),
                name=node_type.title() + "s",
            )
        )

    # canvas y grows downwards
    return fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, autorange="reversed", scaleanchor="x"),
        margin=dict(t=20, b=20, l=20, r=20),
        height=500,
    )


def timeline_chart(buckets: list) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[b["bucket_start"] for b in buckets],
            y=[b["vote_count"] for b in buckets],
            marker_color=VOTER_COLOR,
            customdata=[b["total_credits"] for b in buckets],
            hovertemplate="%{x}<br>%{y} votes, %{customdata} credits<extra></extra>",
        )
    ).update_layout(xaxis_title="", yaxis_title="Votes per hour", height=300)


def overview_tab(data: dict):
    """Summary metrics and option scores."""
    voting = data["voting"]
    cols = st.columns(4)
    cols[0].metric("Votes", voting["total_votes"])
    cols[1].metric("Unique Voters", voting["unique_voters"])
    cols[2].metric("Avg Credits Used", f"{voting['avg_credits_used']:.1f}")
    cols[3].metric("Credits Range", f"{voting['min_credits_used']} – {voting['max_credits_used']}")

    cols = st.columns(4)
    cols[0].metric("Invites", data["invites"]["total"])
    cols[1].metric("Invites Used", data["invites"]["used"])
    cols[2].metric("Proposals", data["proposals"]["total"])
    cols[3].metric("Approved Proposals", data["proposals"]["approved"])

    if not data["option_performance"]:
        st.info("This event has no options yet.")
        return

    st.subheader("📊 Quadratic Scores")
    st.plotly_chart(scores_chart(data["option_performance"]), width="stretch")

    res = data.get("results")
    if res:
        st.subheader("🏁 Results")
        outcome = res["results"]
        if outcome["framework_type"] == "binary_selection":
            for o in outcome["selected_options"]:
                st.write(f"{o['rank']}. **{o['title']}** ({o['votes']:.2f})")
        else:
            for d in outcome["distributions"]:
                st.write(f"**{d['title']}**: {outcome['resource_symbol']}{d['allocation_amount']:,.2f}")
            st.caption(f"Gini coefficient: {outcome['gini_coefficient']:.3f}")


def network_tab(data: dict):
    """Voter/option network graph."""
    graph = data["network_graph"]
    if not graph["nodes"]:
        st.info("No votes yet.")
        return

    st.plotly_chart(network_chart(graph), width="stretch")
    st.caption(f"{len(graph['edges'])} allocations across {len(data['individual_votes'])} voters")


def clusters_tab(data: dict):
    """Voting pattern clusters."""
    clusters = data["cluster_analysis"]
    if not clusters["clusters"]:
        st.info("No votes yet.")
        return

    titles = {o["option_id"]: o["title"] for o in data["option_performance"]}
    summary = clusters["summary"]
    cols = st.columns(3)
    cols[0].metric("Patterns", summary["total_clusters"])
    cols[1].metric("Largest Cluster", summary["largest_cluster"])
    cols[2].metric("Diversity", f"{summary['diversity']:.2f}")

    for c in clusters["clusters"]:
        names = [titles.get(option_id, option_id) for option_id in c["pattern"].split(",") if option_id]
        label = " + ".join(names) or "(no credits allocated)"
        st.write(f"**{label}**: {c['voter_count']} voters ({c['percentage']:.1f}%), avg {c['avg_credits']:.1f} credits")


def timeline_tab(data: dict):
    """Participation over time."""
    buckets = data["participation_over_time"]
    if not buckets:
        st.info("No timestamped votes yet.")
        return

    st.plotly_chart(timeline_chart(buckets), width="stretch")


def audit_tab(data: dict, event_id: str):
    """Individual votes, anomalies and CSV export."""
    if data["anomalies"]:
        st.subheader(f"⚠️ {len(data['anomalies'])} Integrity Anomalies")
        st.dataframe(data["anomalies"], width="stretch")

    st.subheader("🧾 Individual Votes")
    st.dataframe(
        [{**v, "allocations": ", ".join(f"{k}: {c}" for k, c in v["allocations"].items())} for v in data["individual_votes"]],
        width="stretch",
    )

    report = analytics.get_report(event_id)
    st.download_button("Export CSV", report.content, file_name=report.filename, mime="text/csv")


def main():
    st.title("🗳️ Quadratic Voting Analytics")

    events = get_events()
    if not events:
        st.info("No events loaded. Run `python load_data.py dump.json` first.")
        return

    titles = {e["id"]: e["title"] for e in events}
    event_id = st.sidebar.selectbox("Select Event", list(titles), format_func=lambda i: titles[i])
    if st.sidebar.button("Refresh"):
        get_event_data.clear()

    with st.spinner("Computing analytics..."):
        try:
            data = get_event_data(event_id)
        except NotFoundError as e:
            st.error(e.message)
            return

    tab1, tab2, tab3, tab4, tab5 = st.tabs(["📊 Overview", "🕸️ Network", "🧩 Clusters", "⏱️ Timeline", "🧾 Audit"])

    with tab1:
        overview_tab(data)

    with tab2:
        network_tab(data)

    with tab3:
        clusters_tab(data)

    with tab4:
        timeline_tab(data)

    with tab5:
        audit_tab(data, event_id)

    st.sidebar.markdown("---")
    st.sidebar.markdown("IP addresses are shown only as non-cryptographic hashes.")


if __name__ == "__main__":
    main()
