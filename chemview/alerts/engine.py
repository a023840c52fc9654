"""Alerting engine: classify, de-duplicate, record.

Evaluation is split in two so a scheduler can suspend between them:

assess()  asks the advisor for a message/severity pair; touches no store.
commit()  applies the result: drop it if the message repeats the newest
          alert, otherwise append an alert and, for medium and high
          severities, a matching audit record.
"""

from __future__ import annotations

from typing import Optional

from chemview.alerts.advisor import Advisor, AlertContext, Advisory, RuleAdvisor
from chemview.history.buffers import AlertList, AlertRecord, AuditLog, Severity
from chemview.logger import get_logger
from chemview.models.plant_state import PlantState

logger = get_logger("chemview.alerts")


class AlertingEngine:
    """Threshold alerting over the alert list and audit trail."""

    def __init__(
        self,
        alerts: AlertList,
        audit: AuditLog,
        advisor: Optional[Advisor] = None,
    ):
        self.alerts = alerts
        self.audit = audit
        self.advisor = advisor or RuleAdvisor()

    def assess(self, context: AlertContext) -> Advisory:
        return self.advisor.advise(context)

    def commit(self, advisory: Advisory) -> Optional[AlertRecord]:
        """Record an advisory unless it repeats the newest alert.

        Returns:
            The appended AlertRecord, or None when suppressed.
        """
        newest = self.alerts.latest()
        if newest is not None and newest.message == advisory.message:
            logger.debug("Alert suppressed (unchanged): %s", advisory.message)
            return None

        record = self.alerts.append(advisory.message, advisory.severity)
        if advisory.severity != Severity.LOW:
            self.audit.append(advisory.message, advisory.severity)
        logger.info("Alert [%s]: %s", advisory.severity.value, advisory.message)
        return record

    def evaluate(self, plant: PlantState, running: bool) -> Optional[AlertRecord]:
        """Assess and commit in one step, with no history context."""
        return self.commit(self.assess(AlertContext(plant=plant, running=running)))
