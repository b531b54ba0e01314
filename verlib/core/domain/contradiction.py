"""
Contradiction — Поиск противоречивых ограничений

Пара ограничений противоречива, если ни одна версия не удовлетворяет обоим.

Поиск по набору:
- Все наборы объединяются в одну последовательность (порядок сохраняется)
- Каждая неупорядоченная пара проверяется ровно один раз
- Проверка в обе стороны: contradicts(a, b) or contradicts(b, a),
  так как таблица случаев несимметрична
- Собираются ВСЕ противоречивые пары, а не только первая
"""

import logging
from typing import List, Optional, Tuple

from verlib.core.domain.constraint import Constraint, Constraints, Operator, overlaps, satisfies

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContradictionError(Exception):
    """
    Два ограничения противоречат друг другу.

    Сообщение: "constraints '<c1>' and '<c2>' are contradictory",
    где <cN> — мягкая строка ограничения.
    """

    def __init__(self, c1: Constraint, c2: Constraint):
        self.c1 = c1
        self.c2 = c2
        super().__init__(f"constraints '{c1}' and '{c2}' are contradictory")

    @property
    def constraints(self) -> Tuple[Constraint, Constraint]:
        """Пара ограничений, вызвавшая противоречие."""
        return self.c1, self.c2


class ContradictionsError(Exception):
    """
    Все противоречивые пары набора ограничений.

    Сообщение — сообщения отдельных ContradictionError, по одному на строку.
    """

    def __init__(self, errors: List[ContradictionError]):
        self.errors: Tuple[ContradictionError, ...] = tuple(errors)
        super().__init__("\n".join(str(e) for e in self.errors))

    def pairs(self) -> List[Tuple[Constraint, Constraint]]:
        return [e.constraints for e in self.errors]

    def __len__(self) -> int:
        return len(self.errors)


# =============================================================================
# PAIRWISE CHECK
# =============================================================================


def contradicts(c1: Constraint, c2: Constraint) -> bool:
    """
    Проверка, противоречат ли два ограничения.

    Таблица случаев (порядок веток значим):
        одинаковые оператор и версия → нет противоречия
        ">" X и ">=" Y, X <= Y        → нет противоречия
        ">=" X и ">" Y, X > Y         → нет противоречия
        "!=" и "!="                   → противоречие, если версии равны
        "!=" X и c                    → противоречие, если X удовлетворяет c
        c и "!=" X                    → противоречие, если X удовлетворяет c
        иначе                         → not overlaps(c1, c2)

    Функция несимметрична: для набора используется проверка в обе стороны.
    """
    op1, op2 = c1.operator, c2.operator
    v1, v2 = c1.version, c2.version

    if op1 is op2 and v1.equal(v2):
        return False
    if op1 is Operator.GT and op2 is Operator.GE and v1.less_equal(v2):
        return False
    if op1 is Operator.GE and op2 is Operator.GT and v1.greater(v2):
        return False
    if op1 is Operator.NE and op2 is Operator.NE:
        return v1.equal(v2)
    if op1 is Operator.NE:
        return satisfies(v1, c2)
    if op2 is Operator.NE:
        return satisfies(v2, c1)
    return not overlaps(c1, c2)


# =============================================================================
# SET-WIDE CHECK
# =============================================================================


def find_contradictions(
    constraints: Constraints, *additional: Constraints
) -> Optional[ContradictionsError]:
    """
    Поиск всех противоречивых пар в объединении наборов.

    Сложность O(n²) по числу ограничений.

    Args:
        constraints: Основной набор
        *additional: Дополнительные наборы

    Returns:
        ContradictionsError со всеми парами (в порядке обхода) или None
    """
    combined: List[Constraint] = list(constraints)
    for extra in additional:
        combined.extend(extra)

    errors: List[ContradictionError] = []
    for i, first in enumerate(combined):
        for second in combined[i + 1 :]:
            if contradicts(first, second) or contradicts(second, first):
                logger.debug("Contradictory constraints: '%s' and '%s'", first, second)
                errors.append(ContradictionError(first, second))

    if not errors:
        return None
    return ContradictionsError(errors)
