DEFAULT_CONFIG = {
    # -----------------------------
    # ENGINE SETTINGS
    # -----------------------------
    "analysis": {
        "delimiter": ",",
        "top_values": 5,             # top values kept per categorical profile
        "category_bar_limit": 10,    # bars per category chart
        "histogram_bins": 4,
        "histogram_columns": 2,      # first N numeric columns get a histogram
        "category_columns": 3,       # first N categorical columns get a bar chart
        "correlation_threshold": 0.3,
    },

    # -----------------------------
    # ARTIFACTS (CLI / DASHBOARD)
    # -----------------------------
    "output": {
        "charts_dpi": 150,
    },
}
