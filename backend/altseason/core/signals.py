"""
Signal Evaluation Module.

Concept: Threshold Rule Table.
Two market scalars drive every signal:
1. BTC dominance: share of total crypto market cap held by Bitcoin.
2. Altseason index: how many top alts are outperforming BTC.

Every rule is checked on its own. A pair of inputs can fire several rules
if their thresholds are ever tuned to overlap.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

BUY = "buy"
SELL = "sell"


@dataclass(frozen=True)
class SignalRule:
    side: str
    message: str
    alert_subject: str
    condition: Callable[[float, float], bool]


@dataclass
class SignalEvaluation:
    buy_signals: list[str] = field(default_factory=list)
    sell_signals: list[str] = field(default_factory=list)
    # (subject, text) pairs to email, in rule order.
    alerts: list[tuple[str, str]] = field(default_factory=list)


SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule(
        side=BUY,
        message="Altseason conditions met — long bias on quality alts",
        alert_subject="BUY Signal Triggered",
        condition=lambda btc_d, asi: btc_d < 55 and asi > 75,
    ),
    SignalRule(
        side=SELL,
        message="BTC dominance high — risk-off for alts",
        alert_subject="SELL Signal Triggered",
        condition=lambda btc_d, asi: btc_d > 58 and asi < 50,
    ),
)


def evaluate_signals(
    btc_dominance: float,
    altseason_index: float,
    rules: tuple[SignalRule, ...] = SIGNAL_RULES,
) -> SignalEvaluation:
    """
    Run every rule against the two inputs.

    Returns:
        SignalEvaluation: Fired messages split by side, plus the alerts to send.
    """
    result = SignalEvaluation()
    for rule in rules:
        if not rule.condition(btc_dominance, altseason_index):
            continue
        bucket = result.buy_signals if rule.side == BUY else result.sell_signals
        bucket.append(rule.message)
        result.alerts.append((rule.alert_subject, rule.message))
    return result
