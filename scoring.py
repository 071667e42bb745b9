"""Academic score: weighted test / attendance / homework, rescaled to 0–10."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from models import StudentRecord

TEST_WEIGHT = 0.5
ATTENDANCE_WEIGHT = 0.3
HOMEWORK_WEIGHT = 0.2

MIN_SCORE = 1
MAX_SCORE = 10

_TWO_PLACES = Decimal("0.01")


def percent(done: Optional[float], total: Optional[float]) -> float:
    """Return *done* as a percentage of *total*, or 0 when there is no total."""
    if not total or total <= 0:
        return 0
    return (done / total) * 100


def round_half_up(value: float) -> float:
    """Round to 2 decimals on the exact binary value, ties going up.

    ``round()`` would send 0.125 to 0.12; stored scores use 0.13.
    """
    return float(Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def _is_set(value: Optional[float]) -> bool:
    # 0 and None both count as "nothing recorded".
    return value is not None and value != 0


def calc_academic(record: StudentRecord) -> None:
    """Recompute ``record.academic`` from the record's raw inputs, in place.

    Any recorded non-zero input earns at least ``MIN_SCORE``; an all-zero
    record stays at 0.
    """
    test_pct = record.test if record.test is not None else 0
    att_pct = percent(record.att, record.att_total)
    hw_pct = percent(record.hw, record.hw_total)

    overall_pct = TEST_WEIGHT * test_pct + ATTENDANCE_WEIGHT * att_pct + HOMEWORK_WEIGHT * hw_pct
    score = (overall_pct / 100) * MAX_SCORE

    if score < MIN_SCORE and (_is_set(record.test) or _is_set(record.att) or _is_set(record.hw)):
        score = MIN_SCORE
    if score > MAX_SCORE:
        score = MAX_SCORE

    record.academic = round_half_up(score)
