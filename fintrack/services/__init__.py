"""
Application services module.
"""

from fintrack.services.scenarios import SCENARIO_KINDS, evaluate_inputs
from fintrack.services.scenario_files import (
    ScenarioFileError,
    export_scenarios,
    import_scenarios,
)

__all__ = [
    "SCENARIO_KINDS",
    "evaluate_inputs",
    "ScenarioFileError",
    "export_scenarios",
    "import_scenarios",
]
