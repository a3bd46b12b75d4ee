"""
Built-in sample datasets, selectable without an upload.
"""

from typing import List

from tabscope.errors import AnalysisError

SAMPLE_DATASETS = {
    "sales": """Date,Product,Category,Sales,Quantity,Region
2024-01-15,Laptop,Electronics,1200,2,North
2024-01-16,Mouse,Electronics,25,5,South
2024-01-17,Keyboard,Electronics,75,3,East
2024-01-18,Monitor,Electronics,300,1,West
2024-01-19,Laptop,Electronics,1200,1,North
2024-01-20,Desk,Furniture,450,2,South
2024-01-21,Chair,Furniture,200,4,East
2024-01-22,Lamp,Furniture,50,3,West
2024-01-23,Mouse,Electronics,25,10,North
2024-01-24,Keyboard,Electronics,75,5,South""",
    "customers": """CustomerID,Age,Gender,Income,SpendingScore,MembershipYears
C001,25,M,45000,65,2
C002,35,F,65000,78,5
C003,28,M,52000,45,1
C004,42,F,85000,92,8
C005,31,M,48000,55,3
C006,38,F,72000,85,6
C007,29,M,55000,40,2
C008,45,F,95000,88,10
C009,33,M,58000,62,4
C010,27,F,48000,50,1""",
}


class UnknownSampleError(AnalysisError):
    """Requested sample dataset does not exist."""


def list_samples() -> List[str]:
    return list(SAMPLE_DATASETS)


def get_sample(name: str) -> str:
    try:
        return SAMPLE_DATASETS[name]
    except KeyError:
        raise UnknownSampleError(
            f"Unknown sample dataset '{name}'. "
            f"Available: {', '.join(list_samples())}"
        ) from None
