from guarded_record import Record
from guarded_record.application.cart import add_item, make_cart
from guarded_record.domain.validators import numeric_only
from guarded_record.presentation.record_report import (
    COLUMNS,
    record_to_dataframe,
    record_to_rows,
    render_csv,
    render_html,
)


def make_record() -> Record:
    cart = make_cart()
    add_item(cart, unit_cost=500, qty=2)
    cart.attach_validated("discount", 0, numeric_only, removable=True)
    return cart


def test_rows_describe_each_field():
    rows = record_to_rows(make_record())

    assert rows == [
        {"name": "items", "kind": "plain", "value": '[{"unit_cost": 500, "qty": 2}]', "removable": "no"},
        {"name": "total", "kind": "computed", "value": "1000", "removable": "no"},
        {"name": "discount", "kind": "validated", "value": "0", "removable": "yes"},
    ]


def test_render_csv():
    lines = render_csv(make_record()).decode("utf-8").splitlines()

    assert lines[0] == "name,kind,value,removable"
    assert lines[2] == "total,computed,1000,no"
    assert len(lines) == 4


def test_render_html():
    assert render_html(Record.create()) == "<p>No fields.</p>"
    html = render_html(make_record())
    assert html.startswith("<table><thead><tr><th>name</th>")
    assert "<td>discount</td><td>validated</td>" in html


def test_record_to_dataframe():
    frame = record_to_dataframe(make_record())

    assert list(frame.columns) == COLUMNS
    assert frame["name"].tolist() == ["items", "total", "discount"]
    assert frame.loc[frame["name"] == "total", "value"].item() == "1000"


def test_render_html_escapes_values():
    record = Record.create({"note": "<b>bold</b> & co"})

    html = render_html(record)

    assert "<b>" not in html
    assert "<td>&lt;b&gt;bold&lt;/b&gt; &amp; co</td>" in html
