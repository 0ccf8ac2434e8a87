"""
Judge implementations.

Available implementations:
- SimulatedJudge: Answers comparisons from ground truth scores plus noise
"""

from .sim_judge import SimulatedJudge

__all__ = ["SimulatedJudge"]
