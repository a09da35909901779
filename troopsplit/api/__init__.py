"""api — public planning entry point."""

from troopsplit.api.plan import PlanError, PlannedComposition, TroopPlan, plan_troops

__all__ = ["PlanError", "PlannedComposition", "TroopPlan", "plan_troops"]
