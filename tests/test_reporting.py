import json

from tabscope import analyze
from tabscope.reporting import MarkdownReport, render_markdown, write_json
from tabscope.reporting.formatters import fmt_coefficient, fmt_number, fmt_text


def test_formatters():
    assert fmt_number(None) == "-"
    assert fmt_number(float("nan")) == "-"
    assert fmt_number(3.0) == "3"
    assert fmt_number(1200) == "1,200"
    assert fmt_number(0.81649) == "0.82"
    assert fmt_coefficient(-0.5591) == "-0.56"
    assert fmt_coefficient(None) == "-"
    assert fmt_text("a|b") == "a\\|b"
    assert fmt_text("") == "-"


def test_markdown_sections(sales_text):
    text = render_markdown(analyze(sales_text))

    assert text.startswith("# Data Analysis Report\n")
    for heading in ("## Overview", "## Key Insights", "## Column Details", "## Correlations", "## Distributions"):
        assert heading in text

    assert "- Dataset contains 10 rows and 6 columns" in text
    assert "| Sales | Quantity | -0.56 |" in text
    assert "| 25-319 | 7 |" in text
    assert "| Laptop | 2 |" in text


def test_markdown_without_correlations(basic_text):
    text = MarkdownReport(title="Basic").render(analyze(basic_text))

    assert text.startswith("# Basic\n")
    assert "_No significant correlations detected._" in text
    assert "| A | numeric | 0 | 3 | mean 2, median 2, std 0.82, range 1 to 3 |" in text
    assert "| B | categorical | 0 | 2 | top: x (2), y (1) |" in text


def test_markdown_build_writes_file(tmp_path, basic_text):
    out = MarkdownReport().build(analyze(basic_text), tmp_path / "reports" / "report.md")

    assert out.exists()
    assert out.read_text(encoding="utf-8").startswith("# Data Analysis Report")


def test_json_payload_matches_result(tmp_path, sales_text):
    result = analyze(sales_text)

    out = write_json(result, tmp_path / "result.json")
    payload = json.loads(out.read_text(encoding="utf-8"))

    assert payload == result.to_dict()
    assert payload["overview"] == {
        "rows": 10,
        "columns": 6,
        "columnNames": ["Date", "Product", "Category", "Sales", "Quantity", "Region"],
    }
    assert payload["correlations"][0]["col1"] == "Sales"
    assert payload["visualizationData"]["distributions"][0]["data"][0] == {
        "bin": "25-319",
        "count": 7,
    }
    assert payload["columns"][1]["stats"]["topValues"][0] == {"value": "Laptop", "count": 2}
