# src/map/__init__.py

from .workspace import Workspace
from .generator import Scenario, ScenarioGenerator, validate_obstacle_count

__all__ = ["Workspace", "Scenario", "ScenarioGenerator", "validate_obstacle_count"]
