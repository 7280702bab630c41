"""Streamlit front-end for the guarded record shopping cart."""
from __future__ import annotations

import streamlit as st

from guarded_record import Record
from guarded_record.application.cart import add_item, make_cart
from guarded_record.presentation.record_report import record_to_dataframe, render_csv, render_html


st.set_page_config(page_title="Guarded Cart", layout="wide")
st.title("Guarded Record Cart")


if "cart" not in st.session_state:
    st.session_state["cart"] = make_cart()
if "messages" not in st.session_state:
    st.session_state["messages"] = []

cart: Record = st.session_state["cart"]

col1, col2, col3 = st.columns([2, 2, 1])
with col1:
    unit_cost = st.number_input("Unit cost", min_value=0, value=500, step=1)
with col2:
    qty = st.number_input("Quantity", min_value=1, value=2, step=1)
with col3:
    add_clicked = st.button("Add item", key="add_item_btn")

if add_clicked:
    add_item(cart, unit_cost=int(unit_cost), qty=int(qty))
    st.rerun()

st.metric("Total", cart.get("total"))

col_set1, col_set2 = st.columns([3, 1])
with col_set1:
    forced_total = st.number_input("Overwrite total", value=83838, step=1)
with col_set2:
    set_clicked = st.button("Set total", key="set_total_btn")

if set_clicked:
    result = cart.set("total", int(forced_total))
    if result.ok:
        st.session_state["messages"].append("Total overwritten")
    else:
        st.session_state["messages"].append(f"Write rejected: {result.reason}")
    st.rerun()

for message in st.session_state["messages"]:
    st.warning(message)

reset_clicked = st.button("Reset cart", key="reset_cart_btn")
if reset_clicked:
    st.session_state["cart"] = make_cart()
    st.session_state["messages"] = []
    st.rerun()

tabs = st.tabs(["Fields", "JSON"])
with tabs[0]:
    st.dataframe(record_to_dataframe(cart))
    st.download_button(
        "Download fields CSV",
        data=render_csv(cart),
        file_name="cart_fields.csv",
        mime="text/csv",
    )
    st.download_button(
        "Download fields HTML",
        data=render_html(cart).encode("utf-8"),
        file_name="cart_fields.html",
        mime="text/html",
    )
with tabs[1]:
    st.code(cart.serialize(indent=2), language="json")
