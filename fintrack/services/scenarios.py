"""
Scenario evaluation.
"""

from typing import Any, Dict, Tuple

from fintrack.calculators import CALCULATORS, run_calculation

SCENARIO_KINDS = sorted(CALCULATORS)


def evaluate_inputs(
    kind: str, inputs: Dict[str, Any]
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Validate inputs for a scenario kind and run its calculation.

    Returns:
        (normalized inputs, results) as JSON-ready dicts

    Raises:
        pydantic.ValidationError: Inputs do not match the kind's schema
        ValueError: Unknown kind or a failed calculation
            (CalculationError when the result overflows)
    """
    if kind not in CALCULATORS:
        raise ValueError(f"Unknown scenario kind {kind!r}; expected one of {SCENARIO_KINDS}")
    input_model, calculation = CALCULATORS[kind]
    parsed = input_model.model_validate(inputs)
    results = run_calculation(calculation, parsed)
    return parsed.model_dump(mode="json"), results.model_dump(mode="json")
