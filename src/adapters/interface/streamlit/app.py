"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.persist_ledger import LoadLedgerUseCase
from src.domain.models import CategoryBreakdown, FinancialAnalytics
from src.infrastructure.container import (
    build_financial_engine,
    build_ledger_repository,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


_RISK_BADGES = {
    "low": "🟢",
    "moderate": "🟡",
    "high": "🟠",
    "critical": "🔴",
}


def _fetch_analytics(settings: LedgerSettings) -> FinancialAnalytics | None:
    """Load the stored ledger and compute its analytics report."""
    engine = build_financial_engine(settings)
    loaded = LoadLedgerUseCase(build_ledger_repository()).execute(
        engine,
        settings.storage_key,
    )
    if loaded is None:
        return None
    return engine.generate_analytics()


@st.cache_data(show_spinner=False)
def _load_analytics(
    storage_key: str,
    currency: str,
    schema_version: int = 1,
) -> FinancialAnalytics | None:
    """Cached wrapper around _fetch_analytics for Streamlit sessions."""
    _ = schema_version
    return _fetch_analytics(
        LedgerSettings(currency=currency, storage_key=storage_key)
    )


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / baseline) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _format_ratio(value: Decimal, suffix: str = "") -> str:
    """Format a KPI ratio; the unbounded debt-to-worth value shows as ∞."""
    if value.is_infinite():
        return "∞"
    return f"{value:,.2f}{suffix}"


def _kpi_rows(analytics: FinancialAnalytics) -> list[dict[str, str]]:
    """Build the KPI table rows."""
    metrics = analytics.metrics
    return [
        {
            "KPI": "Debt-to-income",
            "Value": _format_ratio(metrics.debt_to_income_ratio, "%"),
        },
        {
            "KPI": "Debt-to-worth",
            "Value": _format_ratio(metrics.debt_to_worth_ratio, "%"),
        },
        {
            "KPI": "Savings rate",
            "Value": _format_ratio(metrics.savings_rate, "%"),
        },
        {
            "KPI": "Liquidity ratio",
            "Value": _format_ratio(metrics.liquidity_ratio),
        },
        {
            "KPI": "Investment ratio",
            "Value": _format_ratio(metrics.investment_ratio, "%"),
        },
        {
            "KPI": "Net worth growth",
            "Value": _format_ratio(metrics.net_worth_growth_rate, "%"),
        },
        {
            "KPI": "Emergency fund (months)",
            "Value": _format_ratio(metrics.emergency_fund_months),
        },
    ]


def _render_risk(analytics: FinancialAnalytics) -> None:
    """Render the risk level with its factors and recommendations."""
    risk = analytics.risk_assessment
    level = risk.risk_level.value
    st.subheader("Risk")
    st.metric("Risk level", f"{_RISK_BADGES.get(level, '')} {level.title()}")
    if not risk.risk_factors:
        st.success("No risk factors detected.")
        return
    for factor, recommendation in zip(
        risk.risk_factors,
        risk.recommendations,
    ):
        st.warning(f"{factor}: {recommendation}")


def _render_breakdown_chart(
    breakdown: CategoryBreakdown,
    currency_code: str,
    title: str,
    max_categories: int = 6,
    chart_size: int = 300,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of amounts by category.

    Args:
        breakdown: Amounts by category.
        currency_code: Currency used for labels.
        title: Chart title to display above the donut.
        max_categories: Maximum categories before grouping into Other.
        chart_size: Width/height for the chart canvas.
        palette: Optional color palette override.
    """
    st.subheader(title)
    data, total_amount = _prepare_donut_chart_data(
        breakdown,
        currency_code,
        max_categories=max_categories,
    )
    if not data or total_amount == 0:
        st.info("No amounts available for the chart.")
        return

    palette_scale = list(
        palette
        or [
            "#1b9aaa",
            "#2e7d32",
            "#f4a261",
            "#e76f51",
            "#457b9d",
            "#f6c453",
            "#6c8ead",
        ]
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=palette_scale),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.4)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="amount_label:N")

    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _prepare_donut_chart_data(
    breakdown: CategoryBreakdown,
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Categories with a zero amount are left out.

    Args:
        breakdown: Amounts by category.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        ((category.value, amount) for category, amount in breakdown.items()
         if amount != 0),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = breakdown.total()

    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label.replace("_", " ").title(),
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    settings = LedgerSettings.from_env()
    analytics = _load_analytics(
        settings.storage_key,
        settings.currency,
        schema_version=1,
    )
    if analytics is None:
        st.warning("No ledger stored yet. Run the import first.")
        return
    get_usage_logger().info(f"Dashboard viewed for '{settings.storage_key}'")

    currency_code = settings.currency
    history = analytics.net_worth_history
    latest = history[-1]
    baseline = history[-2] if len(history) > 1 else latest
    st.caption(
        f"{len(history)} snapshots, latest {latest.date.isoformat()}"
    )

    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(latest.total_assets, currency_code),
        _format_delta_with_percent(
            latest.total_assets - baseline.total_assets,
            baseline.total_assets,
        ),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(latest.total_liabilities, currency_code),
        _format_delta_with_percent(
            latest.total_liabilities - baseline.total_liabilities,
            baseline.total_liabilities,
        ),
        delta_color="inverse",
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(latest.net_worth, currency_code),
        _format_delta_with_percent(
            latest.net_worth - baseline.net_worth,
            baseline.net_worth,
        ),
    )

    income_col, expenses_col, savings_col = st.columns(3)
    income_col.metric(
        "Monthly Income",
        _format_currency(analytics.monthly_income_total, currency_code),
    )
    expenses_col.metric(
        "Monthly Expenses",
        _format_currency(analytics.monthly_expenses_total, currency_code),
    )
    savings_col.metric(
        "Projected Annual Savings",
        _format_currency(analytics.annual_projected_savings, currency_code),
    )

    kpi_col, risk_col = st.columns(2)
    with kpi_col:
        st.subheader("KPIs")
        st.dataframe(_kpi_rows(analytics), width="stretch", hide_index=True)
    with risk_col:
        _render_risk(analytics)

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_breakdown_chart(
            latest.asset_breakdown,
            currency_code,
            "Assets by Category",
            max_categories=5,
            chart_size=400,
        )
    with chart_right:
        _render_breakdown_chart(
            latest.liability_breakdown,
            currency_code,
            "Liabilities by Category",
            max_categories=5,
            chart_size=400,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
