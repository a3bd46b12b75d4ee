"""
UI defaults for the Tabscope dashboard.
Purely presentation-level config
"""

APP_NAME = "Data Analysis Dashboard"
APP_ICON = "📊"

UPLOAD_TYPES = ["csv"]

TABS = ["Overview", "Columns", "Insights", "Visualizations"]
