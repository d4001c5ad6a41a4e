"""Health predicates and result aggregation."""

from .evaluator import HealthEvaluator, HealthReport, controller_ok, logical_ok, physical_ok

__all__ = ['HealthEvaluator', 'HealthReport', 'controller_ok', 'logical_ok', 'physical_ok']
