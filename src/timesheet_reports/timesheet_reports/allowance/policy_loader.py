from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Sequence

from ..common.validators import clean_text
from ..core.enums import FoodPolicy
from ..core.exceptions import StructuralError, ValidationError
from .model import EmployeePolicy, ProjectPolicy

logger = logging.getLogger(__name__)


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _is_yes(value: Any) -> bool:
    return clean_text(value).lower() == "yes"


def parse_food_policy(value: Any) -> Optional[FoodPolicy]:
    text = " ".join(clean_text(value).lower().split())
    for policy in FoodPolicy:
        if policy.value.lower() == text:
            return policy
    return None


def parse_amount(value: Any, *, employee_name: str) -> Decimal:
    """Amount per day; unreadable values count as 0, negatives are refused."""
    if value is None or clean_text(value) == "":
        return Decimal("0")
    try:
        amount = Decimal(clean_text(value).replace(",", ""))
    except InvalidOperation:
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    if amount < 0:
        raise ValidationError(f"Negative food allowance amount for {employee_name}: {amount}")
    return amount


def _body_rows(rows: Iterable[Sequence[Any]], table: str):
    it = iter(rows)
    if next(it, None) is None:
        raise StructuralError(f"{table} table is empty: expected a header row")
    return it


class PolicyTableLoader:
    """Materializes the two policy sheets into lookup maps (row 1 = header)."""

    def load_project_policies(self, rows: Iterable[Sequence[Any]]) -> dict[str, ProjectPolicy]:
        out: dict[str, ProjectPolicy] = {}
        for row in _body_rows(rows, "Project policy"):
            code = clean_text(_cell(row, 0))
            if not code:
                continue
            out[code] = ProjectPolicy(
                project_code=code,
                project_name=clean_text(_cell(row, 1)),
                location=clean_text(_cell(row, 2)),
                policy1_eligible=_is_yes(_cell(row, 3)),
                policy2_eligible=_is_yes(_cell(row, 4)),
            )
        logger.info("Loaded %s project policies", len(out))
        return out

    def load_employee_policies(self, rows: Iterable[Sequence[Any]]) -> dict[str, EmployeePolicy]:
        out: dict[str, EmployeePolicy] = {}
        for row in _body_rows(rows, "Employee policy"):
            name = clean_text(_cell(row, 0))
            policy = parse_food_policy(_cell(row, 2))
            if not name or policy is None:
                if name:
                    logger.debug("Skipping %s: unknown food policy %r", name, _cell(row, 2))
                continue
            out[name] = EmployeePolicy(
                employee_name=name,
                policy=policy,
                amount_per_day=parse_amount(_cell(row, 1), employee_name=name),
            )
        logger.info("Loaded %s employee food policies", len(out))
        return out
