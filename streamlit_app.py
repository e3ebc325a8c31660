import streamlit as st
import pandas as pd
from io import BytesIO
from pathlib import Path

from loguru import logger
from openpyxl import Workbook
from openpyxl.utils.dataframe import dataframe_to_rows

from app_logging import setup_logging
from profit_calculator import (
    InvalidInputError,
    calculate_profit,
    format_currency,
    format_summary,
    parse_inputs,
)

README_PATH = Path(__file__).resolve().parent / "README.md"

# Session state keys for the three form fields
INPUT_FIELDS = {
    "revenue_text": ("Revenue (cents)", "Enter Revenue in cents (e.g. 10000000) here..."),
    "expenses_text": ("Expenses (cents)", "Enter Expenses in cents (e.g. 5000000) here..."),
    "tax_rate_text": ("Tax Rate (%)", "Enter Tax rate (%) (e.g. 19.5) here..."),
}


setup_logging()
st.title("Profit Calculator")


def result_table(result):
    """Return one row per metric with its raw value and display string."""
    return pd.DataFrame(
        {
            "Metric": ["EBT (cents)", "Profit (cents)", "Profit Ratio"],
            "Value": [float(result.ebt), result.profit, result.profit_ratio],
            "Display": [
                f"{format_currency(result.ebt / 100)} euros",
                f"{format_currency(result.profit / 100)} euros",
                f"{result.profit_ratio * 100:.2f}%",
            ],
        }
    )


def build_excel():
    """Assemble the calculator inputs, results, and README into a workbook."""
    buffer = BytesIO()
    wb = Workbook()

    ws_inputs = wb.active
    ws_inputs.title = "Inputs"
    for k, v in st.session_state.get("profit_inputs", {}).items():
        ws_inputs.append([k, v])

    result = st.session_state.get("profit_result")
    if result is not None:
        ws_results = wb.create_sheet("Results")
        for row in dataframe_to_rows(result_table(result), index=False, header=True):
            ws_results.append(row)
        ws_results.append([])
        ws_results.append(["Summary"])
        for line in format_summary(result).splitlines():
            ws_results.append([line])

    if README_PATH.exists():
        ws_readme = wb.create_sheet("README")
        for line in README_PATH.read_text().splitlines():
            ws_readme.append([line])

    wb.save(buffer)
    buffer.seek(0)
    return buffer


def export_button():
    """Render a download button for the current workbook."""
    buffer = build_excel()
    st.download_button(
        label="Export to Excel",
        data=buffer,
        file_name="profit_calculator.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        help="Export the inputs, results, and the README as an Excel file.",
    )


def reset_inputs():
    """Clear the form fields and any stored result."""
    for key in INPUT_FIELDS:
        st.session_state[key] = ""
    st.session_state.pop("profit_inputs", None)
    st.session_state.pop("profit_result", None)


def profit_calculator():
    """Profit calculator form with summary and results table."""
    st.header("Post-Tax Profit")
    st.info(
        "Enter revenue and expenses in cents and the tax rate in percent to compute earnings before tax, profit after tax, and the profit ratio."
    )

    with st.form("profit_form"):
        texts = {
            key: st.text_input(label, key=key, placeholder=placeholder)
            for key, (label, placeholder) in INPUT_FIELDS.items()
        }
        col_calc, col_reset = st.columns(2)
        with col_calc:
            calculate = st.form_submit_button(
                "Calculate", help="Compute profit from the values above."
            )
        with col_reset:
            st.form_submit_button(
                "Reset", on_click=reset_inputs, help="Clear all fields and results."
            )

    if calculate:
        try:
            revenue, expenses, tax_rate = parse_inputs(
                texts["revenue_text"], texts["expenses_text"], texts["tax_rate_text"]
            )
        except InvalidInputError as err:
            logger.warning("Rejected calculator input: {}", err.__cause__ or err)
            st.error(str(err))
            st.session_state.pop("profit_inputs", None)
            st.session_state.pop("profit_result", None)
        else:
            result = calculate_profit(revenue, expenses, tax_rate)
            logger.info(
                "Calculated profit for revenue={} expenses={} tax_rate={}: {}",
                revenue,
                expenses,
                tax_rate,
                result,
            )
            st.session_state.profit_inputs = {
                "Revenue (cents)": revenue,
                "Expenses (cents)": expenses,
                "Tax Rate (%)": tax_rate,
            }
            st.session_state.profit_result = result

    result = st.session_state.get("profit_result")
    if result is not None:
        st.subheader("Results")
        st.text(format_summary(result))
        st.table(result_table(result))

    export_button()


def readme_page():
    """Display repository README."""
    st.header("ReadMe")
    st.markdown(README_PATH.read_text())


section = st.sidebar.radio(
    "Navigate",
    [
        "Profit Calculator",
        "ReadMe",
    ],
)

if section == "Profit Calculator":
    profit_calculator()
else:
    readme_page()
