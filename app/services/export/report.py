"""CSV report - summary metrics block followed by the per-option table."""

import polars as pl

from app.models.voting import EventAnalytics

OPTION_SCHEMA = {
    "Option": pl.Utf8,
    "Credits": pl.Int64,
    "Votes": pl.Int64,
    "Quadratic Score": pl.Utf8,
}


def metrics_frame(analytics: EventAnalytics) -> pl.DataFrame:
    voting = analytics.voting
    summary = analytics.cluster_analysis.summary
    rows = [
        ("Event", analytics.event.title),
        ("Total Votes", str(voting.total_votes)),
        ("Unique Voters", str(voting.unique_voters)),
        ("Average Credits Used", f"{voting.avg_credits_used:.2f}"),
        ("Max Credits Used", str(voting.max_credits_used)),
        ("Min Credits Used", str(voting.min_credits_used)),
        ("Total Clusters", str(summary.total_clusters)),
        ("Diversity", f"{summary.diversity:.2f}"),
    ]
    return pl.DataFrame(rows, schema={"Metric": pl.Utf8, "Value": pl.Utf8}, orient="row")


def options_frame(analytics: EventAnalytics) -> pl.DataFrame:
    rows = [
        (o.title, o.total_credits, o.vote_count, f"{o.quadratic_score:.2f}")
        for o in analytics.option_performance
    ]
    return pl.DataFrame(rows, schema=OPTION_SCHEMA, orient="row")


def build_report(analytics: EventAnalytics) -> str:
    """CSV text: ``Metric,Value`` block, blank line, ``Option,Credits,Votes,Quadratic Score`` table."""
    return metrics_frame(analytics).write_csv() + "\n" + options_frame(analytics).write_csv()
