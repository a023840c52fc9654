from chemview.alerts.advisor import Advisor, AlertContext, Advisory, RuleAdvisor
from chemview.alerts.engine import AlertingEngine

__all__ = ["Advisor", "AlertContext", "Advisory", "RuleAdvisor", "AlertingEngine"]
