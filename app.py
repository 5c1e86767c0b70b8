import json
import logging

import streamlit as st

from config import configure_logging, get_output_dir
from data_loader import load_default_dataset
from metric_definitions import get_metric_definitions
from report_export import (
    get_run_id,
    reports_to_dataframe,
    reports_to_json,
    save_definitions,
    save_reports_csv,
    save_reports_json,
)
from sales_analysis import SalesAnalysisError, analyze_sales_data
from strategies import calculate_bonus_by_profit, calculate_simple_revenue, get_bonus_tier_definitions
from template_report import generate_template_report

logger = logging.getLogger(__name__)


def init_session_state():
    defaults = {
        "reports": None,
        "run_id": None,
        "dataset_name": "unknown",
        "saved_paths": None,
        "analysis_error": None,
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def _dataset_caption(dataset: dict) -> str:
    parts = []
    for name in ("sellers", "products", "customers", "purchase_records"):
        value = dataset.get(name)
        parts.append(f"{name}: {len(value) if isinstance(value, list) else 'n/a'}")
    return " · ".join(parts)


def main():
    st.set_page_config(page_title="Seller Performance", layout="wide", initial_sidebar_state="expanded")
    configure_logging()
    init_session_state()

    # ----- Sidebar: data source -----
    dataset = None
    dataset_name = ""
    with st.sidebar:
        st.markdown("### Data")
        st.divider()

        default_dataset, default_name = load_default_dataset()
        if default_dataset is not None:
            data_source = st.radio("Data source", ["Use default dataset", "Upload JSON"], key="data_source")
        else:
            data_source = "Upload JSON"

        if data_source == "Use default dataset" and default_dataset is not None:
            dataset = default_dataset
            dataset_name = default_name
        else:
            uploaded = st.file_uploader("Upload dataset JSON", type=["json"], key="file_uploader")
            if uploaded:
                try:
                    dataset = json.load(uploaded)
                    dataset_name = uploaded.name or "uploaded.json"
                except json.JSONDecodeError as e:
                    st.error(f"Invalid JSON: {e}")
            else:
                st.info("Upload a dataset or place dataset.json in the data directory.")

        if isinstance(dataset, dict):
            st.caption(f"**{dataset_name}**")
            st.caption(_dataset_caption(dataset))

        save_artifacts = st.checkbox("Save artifacts to outputs/", value=True, key="save_artifacts")

    # ----- Main area -----
    st.title("Seller Performance Report")
    st.caption("Pipeline: **validate** → **index** → **accumulate** → **rank** → **bonus**")

    if dataset is None:
        st.info("👈 Choose a dataset in the sidebar.")
        return

    if st.button("Analyze sales", type="primary"):
        try:
            reports = analyze_sales_data(
                dataset,
                calculate_revenue=calculate_simple_revenue,
                calculate_bonus=calculate_bonus_by_profit,
            )
        except SalesAnalysisError as e:
            logger.error(f"Analysis failed for {dataset_name}: {e}")
            st.session_state.analysis_error = str(e)
            st.session_state.reports = None
        else:
            run_id = get_run_id()
            saved_paths = None
            if save_artifacts:
                saved_paths = (
                    save_reports_json(reports, run_id),
                    save_reports_csv(reports, run_id),
                )
                save_definitions()
            st.session_state.reports = reports
            st.session_state.run_id = run_id
            st.session_state.dataset_name = dataset_name
            st.session_state.saved_paths = saved_paths
            st.session_state.analysis_error = None
        st.rerun()

    if st.session_state.analysis_error:
        st.error(st.session_state.analysis_error)
        return

    reports = st.session_state.reports
    if not reports:
        return

    run_id = st.session_state.run_id
    template_report = generate_template_report(reports)
    table_df = reports_to_dataframe(reports)

    st.subheader("Results")
    tab_table, tab_summary, tab_defs = st.tabs(["📊 Ranking", "📋 Summary", "📐 Definitions"])

    with tab_table:
        st.dataframe(table_df, width="stretch", hide_index=True)
        col_json, col_csv = st.columns(2)
        with col_json:
            st.download_button(
                "Download JSON",
                data=reports_to_json(reports),
                file_name=f"seller_report_{run_id}.json",
                mime="application/json",
                key="dl_json",
            )
        with col_csv:
            st.download_button(
                "Download CSV",
                data=table_df.to_csv(index=False),
                file_name=f"seller_report_{run_id}.csv",
                mime="text/csv",
                key="dl_csv",
            )

    with tab_summary:
        st.markdown(template_report.replace("\n", "  \n"))
        st.download_button(
            "Download Summary",
            data=template_report,
            file_name=f"seller_summary_{run_id}.md",
            mime="text/markdown",
            key="dl_summary",
        )

    with tab_defs:
        with st.expander("Report fields", expanded=True):
            for name, defn in get_metric_definitions().items():
                st.markdown(f"**{name}**: `{defn['formula']}`")
        with st.expander("Bonus tiers", expanded=True):
            for tier_id, defn in get_bonus_tier_definitions().items():
                st.markdown(f"**{tier_id}** ({defn['multiplier']:.0%}): {defn['condition']}")

    if st.session_state.saved_paths:
        with st.expander("Saved file paths", expanded=False):
            json_path, csv_path = st.session_state.saved_paths
            st.code(
                f"Run ID: {run_id}\n"
                f"JSON: {json_path}\n"
                f"CSV: {csv_path}\n"
                f"Definitions: {get_output_dir() / 'definitions'}",
                language=None,
            )


if __name__ == "__main__":
    main()
