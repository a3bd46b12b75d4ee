import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# -------------------------------------------------
# PATH FIX (ui/ is not an installed package)
# -------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tabscope.samples import SAMPLE_DATASETS  # noqa: E402


@pytest.fixture
def basic_text():
    """
    One numeric and one categorical column, no missing values.
    """
    return "A,B\n1,x\n2,y\n3,x\n"


@pytest.fixture
def missing_text():
    """
    Two numeric columns with one empty cell each.
    """
    return "A,B\n1,\n,2\n3,3\n"


@pytest.fixture
def sales_text():
    return SAMPLE_DATASETS["sales"]


@pytest.fixture
def customers_text():
    return SAMPLE_DATASETS["customers"]
